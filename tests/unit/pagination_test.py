"""Tests for page parameter parsing and page arithmetic."""

from __future__ import annotations

import pytest
from starlette.requests import Request

from snippet_runner.api.pagination import parse_page_params
from snippet_runner.db.helpers import normalize_page_params, preview, total_pages


def _request(query: str) -> Request:
    return Request({"type": "http", "method": "GET", "path": "/api/snippets", "query_string": query.encode()})


@pytest.mark.parametrize(
    ("page", "per_page", "expected"),
    [
        ("3", "25", (3, 25)),
        (None, None, (1, 10)),
        ("abc", "xyz", (1, 10)),
        ("0", "0", (1, 10)),
        ("-2", "-7", (1, 10)),
        ("", "", (1, 10)),
        ("1.5", "2.5", (1, 10)),
        (4, 5, (4, 5)),
    ],
)
def test_normalize_page_params(page: object, per_page: object, expected: tuple[int, int]) -> None:
    assert normalize_page_params(page, per_page) == expected


def test_large_per_page_is_kept() -> None:
    assert normalize_page_params("1", "100000") == (1, 100000)
    assert normalize_page_params("99999999999999999999", "250") == (10**20 - 1, 250)


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("", (1, 10)),
        ("page=2&per_page=5", (2, 5)),
        ("page=two&per_page=five", (1, 10)),
        ("page=-1&per_page=0", (1, 10)),
        ("per_page=3", (1, 3)),
    ],
)
def test_parse_page_params_from_query(query: str, expected: tuple[int, int]) -> None:
    assert parse_page_params(_request(query)) == expected


@pytest.mark.parametrize(("total", "per_page", "expected"), [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2)])
def test_total_pages(total: int, per_page: int, expected: int) -> None:
    assert total_pages(total, per_page) == expected


def test_preview_truncates_to_100_characters() -> None:
    assert preview("a" * 250) == "a" * 100
    assert preview("short") == "short"
