from collections.abc import Mapping
from typing import Any

from snippet_runner.db.helpers import (
    created_at_or_now,
    normalize_page_params,
    preview,
    total_pages,
    validate_snippet_input,
)
from snippet_runner.models import Snippet, SnippetCreate, SnippetPage, SnippetSummary


class InMemorySnippetStore:
    def __init__(self) -> None:
        self.snippets: dict[int, Snippet] = {}
        self._next_id = 1

    async def ensure_ready(self) -> None:
        pass

    async def insert(self, data: SnippetCreate | Mapping[str, Any]) -> Snippet:
        snippet_in = validate_snippet_input(data)
        snippet = Snippet(
            id=self._next_id,
            username=snippet_in.username,
            language=snippet_in.language,
            stdin=snippet_in.stdin,
            source_code=snippet_in.source_code,
            stdout=snippet_in.stdout,
            created_at=created_at_or_now(snippet_in.created_at),
        )
        self.snippets[snippet.id] = snippet
        self._next_id += 1
        return snippet

    async def list_page(self, page: int = 1, per_page: int = 10) -> SnippetPage:
        page, per_page = normalize_page_params(page, per_page)
        ordered = sorted(self.snippets.values(), key=lambda s: (s.created_at, s.id), reverse=True)
        offset = (page - 1) * per_page
        records = [
            SnippetSummary(**s.model_dump(exclude={"source_code"}), source_code=preview(s.source_code))
            for s in ordered[offset : offset + per_page]
        ]
        return SnippetPage(
            total_items=len(ordered),
            total_pages=total_pages(len(ordered), per_page),
            current_page=page,
            records=records,
        )

    async def ping(self) -> bool:
        return True

    async def dispose(self) -> None:
        pass
