"""Unit tests for the search entry points."""

from __future__ import annotations

import pytest

from pagewise import (
    FetchError,
    NotFoundError,
    PagingPolicy,
    SearchCriteria,
    aexists,
    afind_first,
    aiterate,
    current_page,
    exists,
    find_first,
    is_first_page,
    is_last_page,
    iterate,
    plan,
)

USERS = [{"id": i, "email": f"user{i}@example.com"} for i in range(1, 8)]


class TestIterate:
    """Test iterate() and aiterate()."""

    def test_iterate(self, list_fetcher):
        fetcher = list_fetcher(USERS)
        criteria = SearchCriteria(policy=PagingPolicy(max_page_size=3)).offset(2).limit(3)

        assert [user["id"] for user in iterate(criteria, fetcher)] == [3, 4, 5]

    @pytest.mark.asyncio
    async def test_aiterate(self, async_list_fetcher):
        fetcher = async_list_fetcher(USERS)
        criteria = SearchCriteria(policy=PagingPolicy(max_page_size=3)).offset(2)

        rows = [user["id"] async for user in aiterate(criteria, fetcher)]

        assert rows == [3, 4, 5, 6, 7]
        assert fetcher.pages == [1, 2, 3]


class TestFindFirst:
    """Test find_first() and exists()."""

    def test_returns_first_result(self, list_fetcher):
        assert find_first(SearchCriteria(), list_fetcher(USERS)) == USERS[0]

    def test_narrows_criteria_to_first_element(self, list_fetcher):
        fetcher = list_fetcher(USERS)
        criteria = SearchCriteria().where(active=True).offset(5).limit(20)

        find_first(criteria, fetcher, email="user1@example.com")

        assert criteria.settings.limit == 1
        assert criteria.settings.offset == 0
        assert criteria.settings.filters == {"active": True, "email": "user1@example.com"}
        assert fetcher.pages == [1]
        assert fetcher.requests[0].per_page == 1
        assert fetcher.requests[0].filters == {"active": True, "email": "user1@example.com"}

    def test_returns_none_when_nothing_found(self, list_fetcher):
        assert find_first(SearchCriteria(), list_fetcher([]), email="x") is None

    def test_strict_raises_not_found(self, list_fetcher):
        with pytest.raises(NotFoundError) as exc_info:
            find_first(SearchCriteria(), list_fetcher([]), strict=True, email="x")

        assert exc_info.value.filters == {"email": "x"}
        assert str(exc_info.value) == "Couldn't find a result with {'email': 'x'}"

    def test_fetch_error_is_swallowed_by_default(self, list_fetcher):
        assert find_first(SearchCriteria(), list_fetcher(USERS, fail_pages={1})) is None

    def test_strict_propagates_fetch_error(self, list_fetcher):
        criteria = SearchCriteria()
        with pytest.raises(FetchError):
            find_first(criteria, list_fetcher(USERS, fail_pages={1}), strict=True)
        assert criteria.settings.raise_on_error is True

    def test_exists(self, list_fetcher):
        assert exists(SearchCriteria(), list_fetcher(USERS), email="user1@example.com") is True
        assert exists(SearchCriteria(), list_fetcher([])) is False

    @pytest.mark.asyncio
    async def test_afind_first(self, async_list_fetcher):
        fetcher = async_list_fetcher(USERS)
        assert await afind_first(SearchCriteria().offset(3), fetcher) == USERS[0]
        assert fetcher.requests[0].per_page == 1

    @pytest.mark.asyncio
    async def test_afind_first_strict_not_found(self, async_list_fetcher):
        with pytest.raises(NotFoundError):
            await afind_first(SearchCriteria(), async_list_fetcher([]), strict=True)

    @pytest.mark.asyncio
    async def test_aexists(self, async_list_fetcher):
        assert await aexists(SearchCriteria(), async_list_fetcher(USERS)) is True
        assert await aexists(SearchCriteria(), async_list_fetcher([])) is False


class TestDiagnostics:
    """Test plan and cursor diagnostics."""

    def test_plan_returns_cached_plan(self):
        criteria = SearchCriteria().offset(2141).limit(2141)
        assert plan(criteria) is criteria.plan()
        assert plan(criteria).page_range == range(9, 19)

    def test_cursor_diagnostics(self):
        criteria = SearchCriteria().offset(0).limit(500)

        assert current_page(criteria) == 1
        assert is_first_page(criteria)
        assert not is_last_page(criteria)

        criteria.cursor.advance()
        assert current_page(criteria) == 2
        assert not is_first_page(criteria)
        assert is_last_page(criteria)

    def test_cursor_after_iteration(self, list_fetcher):
        criteria = SearchCriteria(policy=PagingPolicy(max_page_size=2)).limit(4)
        list(iterate(criteria, list_fetcher(USERS)))

        assert current_page(criteria) is None
        assert not is_last_page(criteria)

    def test_open_criteria_is_never_on_last_page(self):
        criteria = SearchCriteria()
        assert current_page(criteria) == 1
        assert not is_last_page(criteria)
