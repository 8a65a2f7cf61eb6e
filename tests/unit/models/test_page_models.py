"""Unit tests for page request and fetched page models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pagewise import FetchedPage, PageRequest


class TestPageRequest:
    """Test PageRequest model."""

    def test_valid(self):
        request = PageRequest(filters={"user_id": "u-1"}, sort="name", page=3, per_page=50)
        assert request.filters == {"user_id": "u-1"}
        assert request.sort == "name"
        assert request.page == 3
        assert request.per_page == 50

    def test_defaults(self):
        request = PageRequest(page=1, per_page=1)
        assert request.filters == {}
        assert request.sort is None

    @pytest.mark.parametrize("field", ["page", "per_page"])
    def test_rejects_zero(self, field):
        values = {"page": 1, "per_page": 1, field: 0}
        with pytest.raises(ValidationError):
            PageRequest(**values)

    def test_frozen(self):
        request = PageRequest(page=1, per_page=1)
        with pytest.raises(ValidationError):
            request.page = 2


class TestFetchedPage:
    """Test FetchedPage model."""

    def test_raw_count_defaults_to_row_count(self):
        assert FetchedPage(rows=[1, 2, 3]).raw_count == 3

    def test_explicit_raw_count(self):
        page = FetchedPage(rows=[1], raw_count=10)
        assert page.rows == [1]
        assert page.raw_count == 10

    def test_none_raw_count_defaults_to_row_count(self):
        assert FetchedPage(rows=["a", "b"], raw_count=None).raw_count == 2

    def test_empty(self):
        page = FetchedPage.empty()
        assert page.rows == []
        assert page.raw_count == 0

    def test_rejects_negative_raw_count(self):
        with pytest.raises(ValidationError):
            FetchedPage(rows=[], raw_count=-1)
