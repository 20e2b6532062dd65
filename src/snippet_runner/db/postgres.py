import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import RowMapping, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from snippet_runner.core.errors import StorageError
from snippet_runner.db.helpers import (
    PREVIEW_LENGTH,
    TABLE_NAME,
    created_at_or_now,
    normalize_page_params,
    total_pages,
    validate_snippet_input,
)
from snippet_runner.models import Snippet, SnippetCreate, SnippetPage, SnippetSummary

logger = logging.getLogger(__name__)

_COLUMNS = "id, username, language, stdin, source_code, stdout, created_at"


async def _ensure_snippets_table(engine: AsyncEngine) -> None:
    ddl = (
        f"CREATE TABLE IF NOT EXISTS {TABLE_NAME} ("
        " id BIGSERIAL PRIMARY KEY,"
        " username VARCHAR(255) NOT NULL,"
        " language VARCHAR(255) NOT NULL,"
        " stdin TEXT,"
        " source_code TEXT NOT NULL,"
        " stdout TEXT,"
        " created_at TIMESTAMPTZ NOT NULL DEFAULT now()"
        ")"
    )
    index = f"CREATE INDEX IF NOT EXISTS ix_{TABLE_NAME}_created_at_id ON {TABLE_NAME} (created_at DESC, id DESC)"
    async with engine.begin() as conn:
        await conn.execute(text(ddl))
        await conn.execute(text(index))


class PostgresSnippetStore:
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._ready = False

    async def ensure_ready(self) -> None:
        """Create the snippets table on first use."""
        if self._ready:
            return
        try:
            await _ensure_snippets_table(self._engine)
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError("Snippet table is unavailable") from exc
        self._ready = True

    async def insert(self, data: SnippetCreate | Mapping[str, Any]) -> Snippet:
        snippet_in = validate_snippet_input(data)
        params = {
            "username": snippet_in.username,
            "language": snippet_in.language,
            "stdin": snippet_in.stdin,
            "source_code": snippet_in.source_code,
            "stdout": snippet_in.stdout,
            "created_at": created_at_or_now(snippet_in.created_at),
        }
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(
                    text(
                        f"""
                        INSERT INTO {TABLE_NAME} (username, language, stdin, source_code, stdout, created_at)
                        VALUES (:username, :language, :stdin, :source_code, :stdout, :created_at)
                        RETURNING {_COLUMNS}
                        """
                    ),
                    params,
                )
                row = result.mappings().one()
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError("Failed to save code snippet") from exc

        snippet = Snippet.model_validate(dict(row))
        logger.info("Stored snippet %d (%s, %s)", snippet.id, snippet.language, snippet.username)
        return snippet

    async def list_page(self, page: int = 1, per_page: int = 10) -> SnippetPage:
        """Return one page of snippets, newest first, with ``source_code`` cut to the preview length."""
        page, per_page = normalize_page_params(page, per_page)
        rows: Sequence[RowMapping]
        try:
            async with self._engine.connect() as conn:
                # count and page must come from the same snapshot
                conn = await conn.execution_options(isolation_level="REPEATABLE READ")
                async with conn.begin():
                    count = await conn.execute(text(f"SELECT count(*) FROM {TABLE_NAME}"))
                    total_items = int(count.scalar_one())
                    offset = (page - 1) * per_page
                    if offset >= total_items:
                        rows = []
                    else:
                        rows = await self._fetch_page(conn, offset, min(per_page, total_items - offset))
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError("Failed to read code snippets") from exc

        return SnippetPage(
            total_items=total_items,
            total_pages=total_pages(total_items, per_page),
            current_page=page,
            records=[SnippetSummary.model_validate(dict(row)) for row in rows],
        )

    @staticmethod
    async def _fetch_page(conn: AsyncConnection, offset: int, limit: int) -> Sequence[RowMapping]:
        # offset and limit stay below the row count, so both fit the driver's int64 binds
        result = await conn.execute(
            text(
                f"""
                SELECT id, username, language, stdin,
                       LEFT(source_code, :preview) AS source_code,
                       stdout, created_at
                FROM {TABLE_NAME}
                ORDER BY created_at DESC, id DESC
                LIMIT :lim OFFSET :off
                """
            ),
            {"preview": PREVIEW_LENGTH, "lim": limit, "off": offset},
        )
        return result.mappings().all()

    async def ping(self) -> bool:
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception:
            return False

    async def dispose(self) -> None:
        await self._engine.dispose()
