# tests/test_pagination.py

import pytest

from utils.custom_paginator import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, OffsetPaginator, positive_int


@pytest.mark.parametrize(
    "value, expected",
    [
        ("3", 3),
        (7, 7),
        (None, 1),
        ("", 1),
        ("abc", 1),
        ("2.5", 1),
        ("0", 1),
        ("-4", 1),
    ],
)
def test_positive_int(value, expected):
    assert positive_int(value, 1) == expected


def test_positive_int_clamps_to_cutoff():
    assert positive_int("500", 10, cutoff=100) == 100


def test_page_size_defaults_and_cap():
    paginator = OffsetPaginator()

    assert paginator.get_page_size({}) == DEFAULT_PAGE_SIZE
    assert paginator.get_page_size({"limit": "1000"}) == MAX_PAGE_SIZE
    assert paginator.get_page_number({"page": "4"}) == 4
