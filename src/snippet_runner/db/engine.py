from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from snippet_runner.config import Settings, get_settings


def get_engine(settings: Settings | None = None) -> AsyncEngine:
    settings = settings or get_settings()
    return create_async_engine(settings.database_url, future=True, pool_pre_ping=True)
