"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from pagewise import FetchError, NotFoundError, PagingError, PlanningError


class TestExceptionHierarchy:
    """Test exception inheritance."""

    @pytest.mark.parametrize("error_class", [PlanningError, FetchError, NotFoundError])
    def test_inherits_paging_error(self, error_class):
        assert issubclass(error_class, PagingError)

    def test_catch_all_with_base(self):
        with pytest.raises(PagingError):
            raise PlanningError("offset must not be negative")


class TestFetchError:
    """Test FetchError attributes."""

    def test_defaults(self):
        error = FetchError("boom")
        assert str(error) == "boom"
        assert error.page_number is None
        assert error.status_code is None

    def test_with_details(self):
        error = FetchError("boom", page_number=3, status_code=503)
        assert error.page_number == 3
        assert error.status_code == 503


class TestNotFoundError:
    """Test NotFoundError messages."""

    def test_default_message_names_filters(self):
        error = NotFoundError(filters={"email": "a@b.c"})
        assert error.filters == {"email": "a@b.c"}
        assert str(error) == "Couldn't find a result with {'email': 'a@b.c'}"

    def test_custom_message(self):
        error = NotFoundError("nothing here")
        assert str(error) == "nothing here"
        assert error.filters == {}
