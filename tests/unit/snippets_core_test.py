"""Unit tests for the snippet service functions."""

from __future__ import annotations

import pytest

from snippet_runner.core.errors import SnippetValidationError
from snippet_runner.core.snippets import create_snippet, list_snippets
from snippet_runner.db import InMemorySnippetStore


@pytest.mark.asyncio
async def test_create_then_list(in_memory_store: InMemorySnippetStore) -> None:
    stored = await create_snippet(
        in_memory_store,
        {"username": "grace", "language": "C++", "source_code": "int main() { return 0; }"},
    )

    page = await list_snippets(in_memory_store, 1, 10)

    assert page.total_items == 1
    assert page.records[0].id == stored.id
    assert page.records[0].source_code == "int main() { return 0; }"


@pytest.mark.asyncio
async def test_create_without_source_persists_nothing(in_memory_store: InMemorySnippetStore) -> None:
    with pytest.raises(SnippetValidationError):
        await create_snippet(in_memory_store, {"username": "grace", "language": "C++"})

    page = await list_snippets(in_memory_store)
    assert page.total_items == 0
