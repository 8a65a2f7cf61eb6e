#!/usr/bin/env python3
from __future__ import annotations

import argparse

from pagewise import plan_window


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show the page plan for an offset/limit window")
    p.add_argument("offset", nargs="?", type=int, default=895)
    p.add_argument("limit", nargs="?", type=int, default=44)
    p.add_argument("max_page_size", nargs="?", type=int, default=250)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    plan = plan_window(offset=args.offset, limit=args.limit, max_page_size=args.max_page_size)
    last = "inf" if plan.is_open else plan.last_page.page_number

    print("=" * 50)
    print(f"Window        : offset={plan.offset} limit={plan.limit}")
    print(f"Page size     : {plan.page_size}")
    print(f"Pages         : {plan.first_page.page_number}..{last}")
    print(f"Result span   : {plan.result_span}")
    print(f"First page    : {plan.relative_first_page_slice} aligned={plan.first_page_aligned}")
    print(f"Last page     : {plan.relative_last_page_slice} aligned={plan.last_page_aligned}")
    print("=" * 50)


if __name__ == "__main__":
    main()
