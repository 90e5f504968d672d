"""
Unit tests for page arithmetic.
"""

import pytest

from focus_hub.services.pagination import MAX_LIMIT, MAX_PAGE, PageRequest


class TestFromParams:
    def test_defaults_when_absent(self):
        page = PageRequest.from_params(None, None)
        assert (page.page, page.limit) == (1, 5)

    @pytest.mark.parametrize("raw", ["abc", "0", "-3", "", "1.5", True])
    def test_invalid_values_fall_back(self, raw):
        page = PageRequest.from_params(raw, raw)
        assert (page.page, page.limit) == (1, 5)

    def test_numeric_strings_parsed(self):
        page = PageRequest.from_params("2", " 10 ")
        assert (page.page, page.limit) == (2, 10)

    def test_custom_defaults(self):
        page = PageRequest.from_params(None, "x", default_page=3, default_limit=20)
        assert (page.page, page.limit) == (3, 20)


def test_offset():
    assert PageRequest(page=1, limit=5).offset == 0
    assert PageRequest(page=3, limit=4).offset == 8


def test_total_pages_rounds_up():
    page = PageRequest(page=1, limit=5)
    assert page.total_pages(0) == 0
    assert page.total_pages(5) == 1
    assert page.total_pages(12) == 3


def test_slice_second_page():
    items = list(range(1, 13))
    assert PageRequest(page=2, limit=5).slice(items) == [6, 7, 8, 9, 10]
    assert PageRequest(page=3, limit=5).slice(items) == [11, 12]
    assert PageRequest(page=4, limit=5).slice(items) == []


def test_huge_values_are_clamped():
    page = PageRequest.from_params("99999999999999999999", "99999999999999999999")
    assert (page.page, page.limit) == (MAX_PAGE, MAX_LIMIT)
    # The largest offset still fits a signed 64-bit integer.
    assert page.offset < 2**63
