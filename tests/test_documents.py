import sys
from datetime import datetime
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from legacy_export.documents import (  # noqa: E402
    article_metadata,
    format_article,
    format_comment,
    format_tag,
)
from legacy_export.schemas import ArticleRecord, CommentRecord, TagRecord  # noqa: E402


def _article(**overrides) -> ArticleRecord:
    data = {
        "id": 42,
        "permalink": "hello-world",
        "title": "Hello world",
        "body": "First post.",
        "excerpt": "  A short\nsummary  ",
        "published_at": datetime(2009, 3, 6, 9, 15, 0),
        "created_at": datetime(2009, 3, 5, 22, 0, 0),
        "tags": ["ruby", "nesta"],
    }
    data.update(overrides)
    return ArticleRecord(**data)


def test_article_categories_are_sorted_and_comma_joined():
    metadata = article_metadata(_article())

    assert metadata["Categories"] == "nesta, ruby"


def test_article_summary_keeps_one_line():
    metadata = article_metadata(_article())

    assert metadata["Summary"] == "A short\\nsummary"


def test_atom_id_only_with_domain():
    assert "Atom ID" not in article_metadata(_article())
    assert article_metadata(_article(), domain="example.com")["Atom ID"] == "tag:example.com,2009-03-05:42"


def test_format_article(tmp_path):
    exported = format_article(_article(), tmp_path, domain="example.com")

    assert exported.path == tmp_path / "hello-world.mdown"
    assert exported.content == (
        "Atom ID: tag:example.com,2009-03-05:42\n"
        "Categories: nesta, ruby\n"
        "Date: 2009-03-06 09:15:00\n"
        "Summary: A short\\nsummary\n"
        "\n"
        "# Hello world\n"
        "\n"
        "First post.\n"
    )


def test_format_article_appends_extended_body(tmp_path):
    exported = format_article(_article(extended="More below the fold.", tags=[]), tmp_path)

    assert exported.content.endswith("# Hello world\n\nFirst post.\n\nMore below the fold.\n")
    assert "Categories: \n" in exported.content


def test_article_record_accepts_tag_objects():
    class FakeTag:
        def __init__(self, name):
            self.name = name

    record = _article(tags=[FakeTag("python"), FakeTag("css")])

    assert record.tags == ["python", "css"]


def test_format_comment(tmp_path):
    comment = CommentRecord(
        id=7,
        author="Graham Ashton",
        email="graham@example.com",
        url=None,
        body="Nice one.",
        created_at=datetime(2009, 3, 7, 8, 1, 2),
        article_permalink="hello-world",
    )

    exported = format_comment(comment, tmp_path)

    assert exported.path == tmp_path / "2009-03-07-080102-graham-ashton.mdown"
    assert exported.content == (
        "Article: hello-world\n"
        "Author: Graham Ashton\n"
        "Author URL: \n"
        "Author email: graham@example.com\n"
        "Date: 2009-03-07 08:01:02\n"
        "\n"
        "Nice one.\n"
    )


def test_format_tag_is_a_single_heading(tmp_path):
    exported = format_tag(TagRecord(name="ruby"), tmp_path)

    assert exported.path == tmp_path / "ruby.mdown"
    assert exported.content == "# ruby\n"


def test_format_tag_prefers_display_name(tmp_path):
    exported = format_tag(TagRecord(name="ruby-on-rails", display_name="Ruby on Rails"), tmp_path)

    assert exported.path == tmp_path / "ruby-on-rails.mdown"
    assert exported.content == "# Ruby on Rails\n"
