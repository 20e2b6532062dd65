from collections.abc import Mapping
from typing import Any

from snippet_runner.core.ports.store import SnippetStore
from snippet_runner.models import Snippet, SnippetCreate, SnippetPage


async def create_snippet(store: SnippetStore, data: SnippetCreate | Mapping[str, Any]) -> Snippet:
    """Persist a new snippet and return the stored record with its generated fields."""
    await store.ensure_ready()
    return await store.insert(data)


async def list_snippets(store: SnippetStore, page: int = 1, per_page: int = 10) -> SnippetPage:
    await store.ensure_ready()
    return await store.list_page(page, per_page)
