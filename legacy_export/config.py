"""Exporter configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


load_dotenv(find_dotenv(usecwd=True))


DEFAULT_ADAPTER = "mysql+pymysql"
DEFAULT_HOST = "localhost"
DEFAULT_DATABASE = "typo"
DEFAULT_ARTICLE_PATH = "content/pages"
DEFAULT_COMMENT_PATH = "content/comments"
DEFAULT_CATEGORY_PATH = "content/categories"


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection parameters for the legacy blog database."""

    adapter: str
    host: str
    database: str
    username: str | None
    password: str | None


@dataclass(frozen=True)
class ExportSettings:
    """Where exported files go and how existing ones are treated."""

    article_path: Path
    comment_path: Path
    category_path: Path
    domain: str | None = None
    clobber: bool = False


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Return database connection defaults loaded from the environment."""

    return DatabaseSettings(
        adapter=os.getenv("LEGACY_DB_ADAPTER", DEFAULT_ADAPTER),
        host=os.getenv("LEGACY_DB_HOST", DEFAULT_HOST),
        database=os.getenv("LEGACY_DB_NAME", DEFAULT_DATABASE),
        username=os.getenv("LEGACY_DB_USERNAME") or None,
        password=os.getenv("LEGACY_DB_PASSWORD") or None,
    )


@lru_cache
def get_export_settings() -> ExportSettings:
    """Return output directories and the Atom domain from the environment."""

    return ExportSettings(
        article_path=Path(os.getenv("LEGACY_EXPORT_ARTICLE_PATH", DEFAULT_ARTICLE_PATH)),
        comment_path=Path(os.getenv("LEGACY_EXPORT_COMMENT_PATH", DEFAULT_COMMENT_PATH)),
        category_path=Path(os.getenv("LEGACY_EXPORT_CATEGORY_PATH", DEFAULT_CATEGORY_PATH)),
        domain=os.getenv("LEGACY_EXPORT_DOMAIN") or None,
        clobber=os.getenv("LEGACY_EXPORT_CLOBBER", "").lower() in {"1", "true", "yes"},
    )
