"""Command line entry point for the legacy blog exporter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn

from .config import DatabaseSettings, ExportSettings, get_database_settings, get_export_settings
from .db import build_database_url, create_db_engine, create_session_factory
from .exporter import ContentExporter, ExportSummary

logger = logging.getLogger(__name__)

USAGE_EXIT_CODE = 1


class ExportArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"{self.prog}: error: {message}\n")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> ExportArgumentParser:
    db_defaults = get_database_settings()
    export_defaults = get_export_settings()
    parser = ExportArgumentParser(
        prog="legacy-export",
        description="Export articles, comments and tags from a legacy blog database into .mdown files",
    )
    parser.add_argument("-a", "--adapter", default=db_defaults.adapter, help="SQLAlchemy dialect, e.g. mysql+pymysql")
    parser.add_argument("-d", "--domain", default=export_defaults.domain, help="Domain used to build Atom IDs")
    parser.add_argument(
        "-c",
        "--clobber",
        action="store_true",
        default=export_defaults.clobber,
        help="Overwrite files that already exist",
    )
    parser.add_argument("--database", default=db_defaults.database, help="Database name")
    parser.add_argument("--host", default=db_defaults.host, help="Database host")
    parser.add_argument("-u", "--username", default=db_defaults.username, help="Database username (required)")
    parser.add_argument("-p", "--password", default=db_defaults.password, help="Database password (required)")
    parser.add_argument("--article-path", type=Path, default=export_defaults.article_path, help="Directory for articles")
    parser.add_argument("--comment-path", type=Path, default=export_defaults.comment_path, help="Directory for comments")
    parser.add_argument(
        "--category-path",
        type=Path,
        default=export_defaults.category_path,
        help="Directory for category pages",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    missing = [name for name in ("username", "password") if not getattr(args, name)]
    if missing:
        parser.error(f"missing required option(s): {', '.join('--' + name for name in missing)}")
    return args


def run_export(database: DatabaseSettings, settings: ExportSettings) -> ExportSummary:
    """Connect to the legacy database and export everything it holds."""

    url = build_database_url(database)
    logger.debug("connecting to %s", url.render_as_string(hide_password=True))
    engine = create_db_engine(url)
    try:
        with create_session_factory(engine)() as db:
            return ContentExporter(db, settings).run()
    finally:
        engine.dispose()


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    _setup_logging(args.verbose)
    database = DatabaseSettings(
        adapter=args.adapter,
        host=args.host,
        database=args.database,
        username=args.username,
        password=args.password,
    )
    settings = ExportSettings(
        article_path=args.article_path,
        comment_path=args.comment_path,
        category_path=args.category_path,
        domain=args.domain or None,
        clobber=args.clobber,
    )
    run_export(database, settings)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
