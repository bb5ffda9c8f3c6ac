"""Mapping from legacy rows to file paths in the content repository."""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path

FILE_EXTENSION = ".mdown"

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(value: str | None) -> str:
    """Lowercase ``value`` and collapse anything outside ``[a-z0-9]`` to ``-``."""

    if not value:
        return ""
    return _NON_SLUG_CHARS.sub("-", value.lower()).strip("-")


def comment_basename(created_at: datetime, author: str | None) -> str:
    """Return ``YYYY-MM-DD-HHMMSS-<author slug>`` for a comment."""

    author_slug = slugify(author) or "anonymous"
    return f"{created_at.strftime('%Y-%m-%d-%H%M%S')}-{author_slug}"


def article_path(directory: Path, permalink: str) -> Path:
    return Path(directory) / f"{permalink}{FILE_EXTENSION}"


def comment_path(directory: Path, created_at: datetime, author: str | None) -> Path:
    return Path(directory) / f"{comment_basename(created_at, author)}{FILE_EXTENSION}"


def category_path(directory: Path, name: str) -> Path:
    return Path(directory) / f"{name}{FILE_EXTENSION}"
