from collections.abc import Mapping
from typing import Any, Protocol

from snippet_runner.models import Snippet, SnippetCreate, SnippetPage


class SnippetStore(Protocol):
    async def ensure_ready(self) -> None: ...

    async def insert(self, data: SnippetCreate | Mapping[str, Any]) -> Snippet: ...

    async def list_page(self, page: int = 1, per_page: int = 10) -> SnippetPage: ...

    async def ping(self) -> bool: ...

    async def dispose(self) -> None: ...
