#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from pagewise import (
    HTTPClient,
    PagingPolicy,
    RestPageFetcher,
    RestSearchSpec,
    SearchCriteria,
    aiterate,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream a window of a paged REST search")
    p.add_argument("base_url", help="API root, e.g. https://api.example.com/v1")
    p.add_argument("path", nargs="?", default="/users/search")
    p.add_argument("--offset", type=int, default=0)
    p.add_argument("--limit", type=int, default=10)
    p.add_argument("--max-page-size", type=int, default=250)
    p.add_argument("--elements-key", default=None)
    p.add_argument("--where", action="append", default=[], metavar="KEY=VALUE")
    p.add_argument("--strict", action="store_true", help="Raise on failed pages")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    filters = dict(item.split("=", 1) for item in args.where)

    criteria = (
        SearchCriteria(policy=PagingPolicy(max_page_size=args.max_page_size))
        .where(**filters)
        .offset(args.offset)
        .limit(args.limit)
        .raise_on_error(args.strict)
    )
    plan = criteria.plan()
    last = plan.last_page.page_number or "end of data"
    print("=" * 65)
    print(f"Criteria   : {criteria!r}")
    print(f"Pages      : {plan.first_page.page_number}..{last} at {plan.page_size} per page")
    print("=" * 65)

    spec = RestSearchSpec(id="search", path=args.path, elements_key=args.elements_key)
    async with HTTPClient(base_url=args.base_url) as client:
        count = 0
        async for row in aiterate(criteria, RestPageFetcher(client, spec)):
            count += 1
            print(f"{args.offset + count - 1:>8} | {row}")
    print("=" * 65)
    print(f"Rows       : {count}")


if __name__ == "__main__":
    asyncio.run(main())
