from alembic.config import Config

from alembic import command


def _config(db_url: str, ini_path: str = "alembic.ini") -> Config:
    alembic_cfg = Config(ini_path)
    alembic_cfg.set_main_option("sqlalchemy.url", db_url)
    return alembic_cfg


def run_migrations(db_url: str, ini_path: str = "alembic.ini") -> None:
    command.upgrade(_config(db_url, ini_path), "head")


def downgrade_migrations(db_url: str, revision: str = "base", ini_path: str = "alembic.ini") -> None:
    command.downgrade(_config(db_url, ini_path), revision)
