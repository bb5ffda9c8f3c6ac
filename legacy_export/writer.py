"""Writes exported files, leaving existing ones alone unless clobbering."""

from __future__ import annotations

import logging
from typing import Literal

from .documents import ExportedFile

logger = logging.getLogger(__name__)

WriteOutcome = Literal["written", "skipped"]


def write_exported_file(exported: ExportedFile, *, clobber: bool = False) -> WriteOutcome:
    """Write ``exported`` to disk and report whether it was written or skipped.

    Filesystem errors are not caught; a failed write aborts the export.
    """

    path = exported.path
    if path.exists() and not clobber:
        logger.info("Skipping %s (exists)", path)
        return "skipped"
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(exported.content)
    logger.info("Wrote %s", path)
    return "written"
