from snippet_runner.db.engine import get_engine
from snippet_runner.db.helpers import (
    PREVIEW_LENGTH,
    TABLE_NAME,
    normalize_page_params,
    total_pages,
)
from snippet_runner.db.memory import InMemorySnippetStore
from snippet_runner.db.postgres import PostgresSnippetStore

__all__ = [
    "PREVIEW_LENGTH",
    "TABLE_NAME",
    "InMemorySnippetStore",
    "PostgresSnippetStore",
    "get_engine",
    "normalize_page_params",
    "total_pages",
]
