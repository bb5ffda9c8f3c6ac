"""Serialization of the ``Key: value`` header read by the static-site engine."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Mapping

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def serialize_metadata(metadata: Mapping[str, Any]) -> str:
    """Render ``metadata`` as ``Key: value`` lines sorted by key.

    Values are written as-is; callers are responsible for keeping them on a
    single line (see :func:`literalize_newlines`). ``None`` renders empty.
    """

    lines = []
    for key in sorted(metadata):
        value = metadata[key]
        lines.append(f"{key}: {'' if value is None else value}")
    return "\n".join(lines)


def literalize_newlines(text: str | None) -> str:
    """Trim ``text`` and replace embedded line breaks with a literal ``\\n``."""

    if not text:
        return ""
    return _LINE_BREAK.sub(r"\\n", text.strip())


def atom_id(domain: str, created_at: date | datetime, content_id: int) -> str:
    """Return the Atom entry id, e.g. ``tag:example.com,2009-03-05:42``."""

    return f"tag:{domain},{created_at.strftime('%Y-%m-%d')}:{content_id}"
