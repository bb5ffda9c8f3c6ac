"""Legacy blog schema models."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from .db import Base


ARTICLE_TYPE = "Article"
COMMENT_TYPE = "Comment"


articles_tags = Table(
    "articles_tags",
    Base.metadata,
    Column("article_id", Integer, ForeignKey("contents.id"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id"), primary_key=True),
)


class Content(Base):
    """Shared table for articles and comments, told apart by ``type``."""

    __tablename__ = "contents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(80), nullable=False, index=True)
    title = Column(String(255), nullable=True)
    permalink = Column(String(255), nullable=True, index=True)
    body = Column(Text, nullable=True)
    extended = Column(Text, nullable=True)
    excerpt = Column(Text, nullable=True)
    # Comment author fields
    author = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    url = Column(String(255), nullable=True)
    article_id = Column(Integer, ForeignKey("contents.id"), nullable=True, index=True)
    published = Column(Boolean, nullable=False, default=False)
    published_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=True)

    article = relationship("Content", remote_side=[id])
    tags = relationship("Tag", secondary=articles_tags, back_populates="contents")


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    display_name = Column(String(255), nullable=True)

    contents = relationship("Content", secondary=articles_tags, back_populates="tags")
