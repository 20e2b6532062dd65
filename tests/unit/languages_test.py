"""Tests for the static language table."""

import pytest

from snippet_runner.core.languages import language_table, resolve_language_id, supported_languages


@pytest.mark.parametrize(
    ("label", "expected"),
    [("JavaScript", 93), ("Python", 92), ("Java", 91), ("C++", 54)],
)
def test_resolves_known_labels(label: str, expected: int) -> None:
    assert resolve_language_id(label) == expected


@pytest.mark.parametrize("label", ["COBOL", "", "python", "PYTHON", " Python", "c++"])
def test_unknown_or_differently_cased_labels_resolve_to_none(label: str) -> None:
    assert resolve_language_id(label) is None


def test_supported_languages_sorted() -> None:
    labels = supported_languages()
    assert labels == sorted(labels)
    assert {"JavaScript", "Python", "Java", "C++"} <= set(labels)


def test_language_table_matches_resolver() -> None:
    for label, language_id in language_table():
        assert resolve_language_id(label) == language_id
