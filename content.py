"""
Article collection: schema validation and loading of data/articles.json.

Each article record has a title, a description, a ``created_at`` Unix
timestamp, optional ``related_posts`` (slugs of other articles), an optional
``archived`` flag and a Markdown ``body``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from markdown import markdown
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from slugify import slugify

logger = logging.getLogger(__name__)


class ContentError(Exception):
    """Raised when the article collection fails validation."""

    def __init__(self, slug: Optional[str], message: str):
        self.slug = slug
        super().__init__(f"{slug or '<unknown>'}: {message}")


class Article(BaseModel):
    """One entry of the article collection."""

    model_config = ConfigDict(strict=True, frozen=True)

    slug: str = Field(..., min_length=1)
    title: str
    description: str
    created_at: float
    related_posts: List[str] = Field(default_factory=list)
    archived: bool = False
    body: str = ""

    @model_validator(mode="before")
    @classmethod
    def derive_slug(cls, data: Any) -> Any:
        """Fill a missing slug from the title and normalise it."""
        if not isinstance(data, dict):
            return data
        slug = data.get("slug") or data.get("title")
        if isinstance(slug, str):
            data = {**data, "slug": slugify(slug)}
        return data


def validate_article(raw: Any) -> Article:
    try:
        return Article.model_validate(raw)
    except ValidationError as exc:
        slug = raw.get("slug") if isinstance(raw, dict) else None
        raise ContentError(slug if isinstance(slug, str) else None, str(exc)) from exc


def validate_collection(records: List) -> List[Article]:
    articles = [validate_article(record) for record in records]

    slugs = set()
    for article in articles:
        if article.slug in slugs:
            raise ContentError(article.slug, "duplicate slug")
        slugs.add(article.slug)

    for article in articles:
        for ref in article.related_posts:
            if ref not in slugs:
                raise ContentError(article.slug, f"unknown related post '{ref}'")
    return articles


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except ValueError as exc:
        logger.warning("Malformed JSON in %s: %s", path, exc)
        raise ContentError(None, f"{path}: {exc}") from exc


def load_collection(path: Path) -> List[Article]:
    if not path.exists():
        logger.warning("Content file %s not found, serving an empty collection", path)
        return []
    raw = _read_json(path)
    if isinstance(raw, dict):
        raw = raw.get("articles", [])
    if not isinstance(raw, list):
        raise ContentError(None, f"{path} must hold a list of articles")

    try:
        articles = validate_collection(raw)
    except ContentError as exc:
        logger.warning("Invalid content in %s: %s", path, exc)
        raise
    logger.info("Loaded %d articles from %s", len(articles), path)
    return articles


def load_pages(path: Path) -> Dict[str, Dict]:
    if not path.exists():
        return {}
    raw = _read_json(path)
    if not isinstance(raw, dict):
        return {}
    return raw.get("pages", {})


def published(articles: List[Article]) -> List[Article]:
    """Non-archived articles, newest first."""
    live = [a for a in articles if not a.archived]
    return sorted(live, key=lambda a: a.created_at, reverse=True)


def get_article(articles: List[Article], slug: str) -> Optional[Article]:
    for article in articles:
        if article.slug == slug:
            return article
    return None


def related_articles(articles: List[Article], article: Article) -> List[Article]:
    by_slug = {a.slug: a for a in articles}
    return [by_slug[ref] for ref in article.related_posts if ref in by_slug]


def serialize_entries(articles: List[Article]) -> str:
    """Entries in the shape the articles list widget reads."""
    return json.dumps(
        [
            {
                "slug": a.slug,
                "data": a.model_dump(include={"title", "description", "created_at"}),
            }
            for a in articles
        ]
    )


def format_timestamp(created_at: float) -> str:
    dt = datetime.fromtimestamp(created_at, tz=timezone.utc)
    return dt.strftime("%b %d, %Y")


def render_markdown(md_text: str) -> str:
    return markdown(
        md_text or "",
        extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
        output_format="html5",
    )
