"""Per-entity formatting of exported files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .metadata import atom_id, literalize_newlines, serialize_metadata
from .naming import article_path, category_path, comment_path
from .schemas import ArticleRecord, CommentRecord, TagRecord


@dataclass(slots=True, frozen=True)
class ExportedFile:
    """Target path and full text of one exported item."""

    path: Path
    content: str


def article_metadata(article: ArticleRecord, *, domain: str | None = None) -> dict[str, str]:
    """Return the metadata fields written above an article."""

    metadata = {
        "Date": str(article.published_at),
        "Categories": ", ".join(sorted(article.tags)),
        "Summary": literalize_newlines(article.excerpt),
    }
    if domain:
        metadata["Atom ID"] = atom_id(domain, article.created_at, article.id)
    return metadata


def format_article(article: ArticleRecord, directory: Path, *, domain: str | None = None) -> ExportedFile:
    parts = [serialize_metadata(article_metadata(article, domain=domain)), f"# {article.title}", article.body]
    if article.extended and article.extended.strip():
        parts.append(article.extended)
    return ExportedFile(
        path=article_path(directory, article.permalink),
        content="\n\n".join(parts) + "\n",
    )


def comment_metadata(comment: CommentRecord) -> dict[str, str | None]:
    return {
        "Date": str(comment.created_at),
        "Article": comment.article_permalink,
        "Author": comment.author,
        "Author email": comment.email,
        "Author URL": comment.url,
    }


def format_comment(comment: CommentRecord, directory: Path) -> ExportedFile:
    metadata = serialize_metadata(comment_metadata(comment))
    return ExportedFile(
        path=comment_path(directory, comment.created_at, comment.author),
        content=f"{metadata}\n\n{comment.body}\n",
    )


def format_tag(tag: TagRecord, directory: Path) -> ExportedFile:
    return ExportedFile(path=category_path(directory, tag.name), content=f"# {tag.heading}\n")
