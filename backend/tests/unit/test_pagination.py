"""Unit tests for page request parsing and page metadata."""

import pytest

from farmer_registry.domain.entities import MAX_LIMIT, PageInfo, PageRequest


@pytest.mark.parametrize(
    "page, limit, expected",
    [
        (None, None, (1, 10)),
        ("3", "25", (3, 25)),
        (4, 5, (4, 5)),
        ("two", "ten", (1, 10)),
        (0, 0, (1, 10)),
        (-2, -20, (1, 10)),
        ("1.5", "7", (1, 7)),
        ("1", "10000", (1, 500)),
        (2, 500, (2, 500)),
    ],
)
def test_from_raw(page, limit, expected):
    request = PageRequest.from_raw(page, limit)
    assert (request.page, request.limit) == expected


def test_offset():
    assert PageRequest(page=1, limit=10).offset == 0
    assert PageRequest(page=3, limit=10).offset == 20


def test_offset_is_never_negative():
    assert PageRequest.from_raw(-5, 10).offset == 0


def test_page_info_first_page():
    info = PageInfo.build(PageRequest(page=1, limit=10), 25)
    assert info.total_pages == 3
    assert info.has_previous is False
    assert info.has_next is True


def test_page_info_exact_multiple():
    info = PageInfo.build(PageRequest(page=2, limit=10), 20)
    assert info.total_pages == 2
    assert info.has_next is False


def test_page_info_empty():
    info = PageInfo.build(PageRequest(), 0)
    assert info.total_pages == 0
    assert info.has_previous is False
    assert info.has_next is False


def test_page_info_past_the_end():
    info = PageInfo.build(PageRequest(page=9, limit=10), 25)
    assert info.has_previous is True
    assert info.has_next is False


def test_huge_limit_is_clamped():
    request = PageRequest.from_raw(1, 10**19)
    assert request.limit == MAX_LIMIT
