"""Pydantic records for rows read from the legacy database."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArticleRecord(BaseModel):
    """A published article together with its tag names."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    permalink: str = Field(..., min_length=1)
    title: str = ""
    body: str = ""
    extended: str | None = None
    excerpt: str | None = None
    published_at: datetime
    created_at: datetime
    tags: List[str] = Field(default_factory=list)

    @field_validator("title", "body", mode="before")
    @classmethod
    def coerce_missing_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def tag_names(cls, value: Any) -> Any:
        """Accept ORM tag objects as well as plain names."""
        if value is None:
            return []
        return [getattr(tag, "name", tag) for tag in value]


class CommentRecord(BaseModel):
    """An approved comment and the permalink of the article it belongs to."""

    model_config = ConfigDict(frozen=True)

    id: int
    author: str | None = None
    email: str | None = None
    url: str | None = None
    body: str = ""
    created_at: datetime
    article_permalink: str

    @field_validator("body", mode="before")
    @classmethod
    def coerce_missing_body(cls, value: Any) -> Any:
        return "" if value is None else value


class TagRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    name: str = Field(..., min_length=1)
    display_name: str | None = None

    @property
    def heading(self) -> str:
        return self.display_name or self.name
