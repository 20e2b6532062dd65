"""Shared fixtures and helpers for tests."""

import logging
import warnings
from pathlib import Path

import pytest
from testcontainers.core.container import DockerContainer
from testcontainers.core.waiting_utils import wait_for_logs

from alembic import command
from alembic.config import Config
from snippet_runner.db import InMemorySnippetStore

logger = logging.getLogger(__name__)

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# PostgresTestBase: helpers for integration tests that need a database
# ---------------------------------------------------------------------------

_POSTGRES_IMAGE = "postgres:16-alpine"
_READY_LINE = "database system is ready to accept connections"


class PostgresTestBase:
    @staticmethod
    def create_container(image: str = _POSTGRES_IMAGE) -> DockerContainer:
        return DockerContainer(image).with_exposed_ports(5432).with_env("POSTGRES_PASSWORD", "postgres")

    @staticmethod
    def get_alembic_config() -> Config:
        ini_path = str(_REPO_ROOT / "alembic.ini")
        cfg = Config(ini_path)
        cfg.set_main_option("script_location", str(_REPO_ROOT / "alembic"))
        return cfg

    @staticmethod
    def run_migrations(connection_url: str) -> None:
        cfg = PostgresTestBase.get_alembic_config()
        cfg.set_main_option("sqlalchemy.url", connection_url)
        command.upgrade(cfg, "head")

    @staticmethod
    def cleanup_migrations(connection_url: str) -> None:
        cfg = PostgresTestBase.get_alembic_config()
        cfg.set_main_option("sqlalchemy.url", connection_url)
        command.downgrade(cfg, "base")

    @staticmethod
    def wait_for_postgres(container: DockerContainer) -> None:
        # The official image restarts once after running its init scripts.
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            wait_for_logs(container, lambda logs: logs.count(_READY_LINE) >= 2, timeout=60)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def in_memory_store() -> InMemorySnippetStore:
    return InMemorySnippetStore()
