"""Pytest fixtures for Site Distiller tests."""

from datetime import date
from pathlib import Path

import pytest

from schemas.article import Article, ArticleCollection, ShareLink


@pytest.fixture
def write_file(tmp_path):
    """Factory that writes a content file under tmp_path and returns its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fixed_file_dates(monkeypatch):
    """Pin filesystem dates so precedence tests do not depend on the platform.

    Returns a setter taking (created, modified); created may be None to
    mimic platforms without a birth time.
    """
    modules = [
        "site_distiller.parsers.markdown_parser",
        "site_distiller.parsers.text_parser",
    ]

    def _set(created: date | None, modified: date) -> None:
        for module in modules:
            monkeypatch.setattr(
                f"{module}.file_dates", lambda stat_result: (created, modified)
            )

    _set(None, date(2024, 6, 1))
    return _set


@pytest.fixture
def share_providers():
    """Share provider templates used across tests."""
    return [
        ("X", "https://x.com/intent/post?text={TITLE}&url={URL}"),
        ("Mastodon", "https://mastodon.social/share?text={TEXT}%20{TAGS}"),
    ]


@pytest.fixture
def sample_article():
    """A fully assembled article."""
    return Article(
        title="My Great Post",
        description="A post about things",
        tags=["python", "static sites"],
        created=date(2024, 10, 26),
        modified=date(2024, 10, 27),
        link_url="https://example.com/post",
        raw_content="Hello #python",
        rendered_html="<p>Hello #python</p>",
        slug="2024-10-26-my-great-post",
        share_links=[
            ShareLink(provider_name="X", url="https://x.com/intent/post?text=My%20Great%20Post"),
        ],
    )


@pytest.fixture
def sample_collection(sample_article):
    """A collection of two articles, newest first."""
    older = sample_article.model_copy(
        update={
            "title": "Older <Post>",
            "slug": "older-post",
            "created": date(2024, 1, 1),
            "link_url": None,
            "share_links": [],
            "tags": [],
        }
    )
    return ArticleCollection(articles=[sample_article, older])
