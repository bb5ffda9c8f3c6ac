import logging
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from legacy_export.documents import ExportedFile  # noqa: E402
from legacy_export.writer import write_exported_file  # noqa: E402


def test_writes_new_file_and_creates_directories(tmp_path):
    target = tmp_path / "content" / "pages" / "hello.mdown"

    outcome = write_exported_file(ExportedFile(path=target, content="Date: x\n\nBody\n"))

    assert outcome == "written"
    assert target.read_text(encoding="utf-8") == "Date: x\n\nBody\n"


def test_existing_file_is_skipped_without_clobber(tmp_path, caplog):
    target = tmp_path / "hello.mdown"
    target.write_text("original", encoding="utf-8")

    with caplog.at_level(logging.INFO, logger="legacy_export.writer"):
        outcome = write_exported_file(ExportedFile(path=target, content="replacement"))

    assert outcome == "skipped"
    assert target.read_text(encoding="utf-8") == "original"
    assert f"Skipping {target} (exists)" in caplog.text


def test_clobber_replaces_existing_file(tmp_path):
    target = tmp_path / "hello.mdown"
    target.write_text("a much longer original body that must disappear", encoding="utf-8")

    outcome = write_exported_file(ExportedFile(path=target, content="new"), clobber=True)

    assert outcome == "written"
    assert target.read_text(encoding="utf-8") == "new"


def test_write_failure_propagates(tmp_path):
    blocker = tmp_path / "pages"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(OSError):
        write_exported_file(ExportedFile(path=blocker / "hello.mdown", content="x"))
