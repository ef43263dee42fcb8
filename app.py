from __future__ import annotations

import logging
from typing import Dict, List

from flask import Flask, abort, render_template, request

import config
import theme
from articles_list import TAG, BlogArticlesList, BrowserHistory, Element, ListHost
from content import (
    Article,
    format_timestamp,
    get_article,
    load_collection,
    load_pages,
    published,
    related_articles,
    render_markdown,
    serialize_entries,
)

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)

NAV_LINKS = [
    {"label": "Articles", "url": "/", "target": "_self"},
    {"label": "About", "url": "/about", "target": "_self"},
]


def load_articles() -> List[Article]:
    return load_collection(config.DATA_PATH)


def get_about_page() -> Dict:
    page = load_pages(config.DATA_PATH).get("about", {})
    return {
        "title": page.get("title", "About"),
        "content_html": render_markdown(page.get("body", "")),
    }


def build_articles_list(articles: List[Article]) -> BlogArticlesList:
    """Host the articles list widget on the current request's URL."""
    host = ListHost(
        dataset={"entries": serialize_entries(articles)},
        items={a.slug: Element() for a in articles},
        search_input=Element(),
        previous_link=Element(),
        next_link=Element(),
    )
    history = BrowserHistory(href=request.url)
    return BlogArticlesList(host, history, page_size=config.ARTICLES_PAGE_SIZE)


@app.context_processor
def inject_globals():
    return {
        "site_title": config.SITE_TITLE,
        "site_description": config.SITE_DESCRIPTION,
        "format_timestamp": format_timestamp,
        "theme_css": theme.css_variables(),
        "nav_links": NAV_LINKS,
    }


@app.route("/")
def blog_index():
    articles = published(load_articles())
    widget = build_articles_list(articles)
    return render_template(
        "blog_index.html",
        articles=articles,
        widget=widget,
        widget_tag=TAG,
        entries_json=widget.host.dataset["entries"],
        canonical_url=widget.history.href,
    )


@app.route("/articles/<slug>")
def blog_article(slug: str):
    articles = load_articles()
    article = get_article(articles, slug)
    if not article:
        abort(404)
    return render_template(
        "article.html",
        article=article,
        body_html=render_markdown(article.body),
        related=related_articles(articles, article),
    )


@app.route("/about")
def about():
    return render_template("about.html", page=get_about_page())


@app.route("/sitemap.xml")
def sitemap():
    urls = [f"{config.SITE_URL}/", f"{config.SITE_URL}/about"]
    urls += [
        f"{config.SITE_URL}/articles/{a.slug}" for a in published(load_articles())
    ]
    xml = render_template("sitemap.xml", urls=urls)
    return app.response_class(xml, mimetype="application/xml")


@app.errorhandler(404)
def page_not_found(e):
    return render_template("404.html"), 404


if __name__ == "__main__":
    app.run(debug=True)
