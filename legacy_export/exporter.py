"""Export of articles, comments and tags from the legacy database."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from sqlalchemy.orm import Session, selectinload

from .config import ExportSettings
from .documents import ExportedFile, format_article, format_comment, format_tag
from .models import ARTICLE_TYPE, COMMENT_TYPE, Content, Tag
from .schemas import ArticleRecord, CommentRecord, TagRecord
from .writer import write_exported_file

logger = logging.getLogger(__name__)


class ExportError(RuntimeError):
    """Raised when a row cannot be exported because related data is missing."""


@dataclass(slots=True)
class EntityCounts:
    written: int = 0
    skipped: int = 0


@dataclass(slots=True)
class ExportSummary:
    """Written/skipped counts per entity type."""

    articles: EntityCounts = field(default_factory=EntityCounts)
    comments: EntityCounts = field(default_factory=EntityCounts)
    categories: EntityCounts = field(default_factory=EntityCounts)

    @property
    def written(self) -> int:
        return self.articles.written + self.comments.written + self.categories.written

    @property
    def skipped(self) -> int:
        return self.articles.skipped + self.comments.skipped + self.categories.skipped


def load_articles(db: Session) -> List[ArticleRecord]:
    """Return every published article, oldest first."""

    rows = (
        db.query(Content)
        .options(selectinload(Content.tags))
        .filter(Content.type == ARTICLE_TYPE, Content.published.is_(True))
        .order_by(Content.published_at.asc(), Content.id.asc())
        .all()
    )
    return [ArticleRecord.model_validate(row) for row in rows]


def load_comments(db: Session) -> List[CommentRecord]:
    """Return every approved comment with its article's permalink."""

    rows = (
        db.query(Content)
        .options(selectinload(Content.article))
        .filter(Content.type == COMMENT_TYPE, Content.published.is_(True))
        .order_by(Content.created_at.asc(), Content.id.asc())
        .all()
    )
    records: List[CommentRecord] = []
    for row in rows:
        if row.article is None:
            raise ExportError(f"comment id={row.id} refers to missing article id={row.article_id}")
        records.append(
            CommentRecord(
                id=row.id,
                author=row.author,
                email=row.email,
                url=row.url,
                body=row.body,
                created_at=row.created_at,
                article_permalink=row.article.permalink,
            )
        )
    return records


def load_tags(db: Session) -> List[TagRecord]:
    rows = db.query(Tag).order_by(Tag.name.asc()).all()
    return [TagRecord.model_validate(row) for row in rows]


class ContentExporter:
    """Write the legacy blog's content into the flat-file repository."""

    def __init__(self, db: Session, settings: ExportSettings) -> None:
        self._db = db
        self._settings = settings

    def export_articles(self) -> EntityCounts:
        articles = load_articles(self._db)
        logger.debug("loaded %s published articles", len(articles))
        directory = self._settings.article_path
        domain = self._settings.domain
        return self._write_all(format_article(article, directory, domain=domain) for article in articles)

    def export_comments(self) -> EntityCounts:
        comments = load_comments(self._db)
        logger.debug("loaded %s approved comments", len(comments))
        directory = self._settings.comment_path
        return self._write_all(format_comment(comment, directory) for comment in comments)

    def export_categories(self) -> EntityCounts:
        tags = load_tags(self._db)
        logger.debug("loaded %s tags", len(tags))
        directory = self._settings.category_path
        return self._write_all(format_tag(tag, directory) for tag in tags)

    def run(self) -> ExportSummary:
        """Export articles, then comments, then categories."""

        summary = ExportSummary(
            articles=self.export_articles(),
            comments=self.export_comments(),
            categories=self.export_categories(),
        )
        logger.info(
            "export finished: %s written, %s skipped "
            "(articles %s/%s, comments %s/%s, categories %s/%s)",
            summary.written,
            summary.skipped,
            summary.articles.written,
            summary.articles.skipped,
            summary.comments.written,
            summary.comments.skipped,
            summary.categories.written,
            summary.categories.skipped,
        )
        return summary

    def _write_all(self, files: Iterable[ExportedFile]) -> EntityCounts:
        counts = EntityCounts()
        for exported in files:
            outcome = write_exported_file(exported, clobber=self._settings.clobber)
            if outcome == "written":
                counts.written += 1
            else:
                counts.skipped += 1
        return counts
