from __future__ import annotations

from collections.abc import AsyncIterator

from snippet_runner.config import get_settings
from snippet_runner.core.ports.executor import CodeExecutor
from snippet_runner.core.ports.store import SnippetStore
from snippet_runner.db.engine import get_engine
from snippet_runner.db.postgres import PostgresSnippetStore
from snippet_runner.execution.remote import RemoteExecutionClient

_store: PostgresSnippetStore | None = None
_executor: RemoteExecutionClient | None = None


async def get_store() -> AsyncIterator[SnippetStore]:
    """Yield a ``SnippetStore`` instance, creating it lazily on first call."""
    global _store  # noqa: PLW0603
    if _store is None:
        _store = PostgresSnippetStore(get_engine(get_settings()))
    yield _store


async def get_executor() -> AsyncIterator[CodeExecutor]:
    """Yield the shared remote execution client, creating it lazily on first call."""
    global _executor  # noqa: PLW0603
    if _executor is None:
        _executor = RemoteExecutionClient.from_settings(get_settings())
    yield _executor


async def shutdown_dependencies() -> None:
    global _store, _executor  # noqa: PLW0603
    if _store is not None:
        await _store.dispose()
        _store = None
    if _executor is not None:
        await _executor.aclose()
        _executor = None
