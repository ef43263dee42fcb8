"""Shared pytest fixtures for the blog tests."""

import json

import pytest

from articles_list import BlogArticlesList, BrowserHistory, Element, ListHost

SCENARIO_ENTRIES = [
    {"slug": "a", "data": {"title": "Intro"}},
    {"slug": "b", "data": {"title": "Advanced Topics"}},
    {"slug": "c", "data": {"title": "Intro Part 2"}},
]


def make_host(entries=SCENARIO_ENTRIES, controls=True):
    return ListHost(
        dataset={"entries": json.dumps(entries)},
        items={e["slug"]: Element() for e in entries},
        search_input=Element() if controls else None,
        previous_link=Element() if controls else None,
        next_link=Element() if controls else None,
    )


@pytest.fixture
def host():
    return make_host()


@pytest.fixture
def make_widget():
    """Build a widget on a fresh host for the given URL."""

    def _make(url="https://blog.test/", entries=SCENARIO_ENTRIES, page_size=1, controls=True):
        widget_host = make_host(entries, controls=controls)
        return BlogArticlesList(widget_host, BrowserHistory(href=url), page_size=page_size)

    return _make


@pytest.fixture
def articles_file(tmp_path):
    path = tmp_path / "articles.json"
    path.write_text(
        json.dumps(
            {
                "articles": [
                    {
                        "slug": "intro",
                        "title": "Intro",
                        "description": "First",
                        "created_at": 1000,
                        "related_posts": ["intro-part-2"],
                        "body": "# Hello\n\nWorld",
                    },
                    {
                        "slug": "advanced-topics",
                        "title": "Advanced Topics",
                        "description": "Second",
                        "created_at": 2000,
                        "related_posts": [],
                    },
                    {
                        "slug": "intro-part-2",
                        "title": "Intro Part 2",
                        "description": "Third",
                        "created_at": 3000,
                        "related_posts": ["intro"],
                    },
                    {
                        "slug": "old-news",
                        "title": "Old News",
                        "description": "Archived",
                        "created_at": 500,
                        "archived": True,
                    },
                ],
                "pages": {"about": {"title": "About me", "body": "Hi **there**"}},
            }
        ),
        encoding="utf-8",
    )
    return path
