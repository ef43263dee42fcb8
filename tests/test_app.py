"""Route tests using the Flask test client."""

import json
import re

import pytest

import app as blog_app
import config
from content import ContentError


@pytest.fixture
def client(monkeypatch, articles_file):
    monkeypatch.setattr(config, "DATA_PATH", articles_file)
    monkeypatch.setattr(config, "ARTICLES_PAGE_SIZE", 1)
    blog_app.app.config["TESTING"] = True
    with blog_app.app.test_client() as client:
        yield client


def shown_slugs(html):
    return re.findall(r'<li class="([\w-]+)" style="display: list-item">', html)


class TestIndex:
    def test_first_page(self, client) -> None:
        resp = client.get("/")
        html = resp.get_data(as_text=True)

        assert resp.status_code == 200
        assert shown_slugs(html) == ["intro-part-2"]
        assert "old-news" not in html
        assert 'class="next-page-link" style="display: unset"' in html
        assert 'class="previous-page-link" style="display: none"' in html

    def test_query_and_page(self, client) -> None:
        html = client.get("/?query=INTRO&page=2").get_data(as_text=True)

        assert shown_slugs(html) == ["intro"]
        assert 'value="INTRO"' in html
        assert 'class="previous-page-link" style="display: unset"' in html
        assert 'class="next-page-link" style="display: none"' in html

    def test_canonical_url_carries_state(self, client) -> None:
        html = client.get("/?query=intro").get_data(as_text=True)
        assert 'rel="canonical" href="http://localhost/?query=intro&amp;page=1"' in html

    def test_entries_serialized_on_host(self, client) -> None:
        html = client.get("/").get_data(as_text=True)
        assert "<blog-articles-list data-entries=" in html
        assert "&#34;slug&#34;: &#34;intro&#34;" in html

    def test_no_results(self, client) -> None:
        html = client.get("/?query=zzz").get_data(as_text=True)
        assert shown_slugs(html) == []
        assert "No articles found." in html

    def test_empty_collection(self, client, monkeypatch, tmp_path) -> None:
        monkeypatch.setattr(config, "DATA_PATH", tmp_path / "missing.json")
        resp = client.get("/")
        assert resp.status_code == 200
        assert "No articles found." in resp.get_data(as_text=True)


class TestArticle:
    def test_renders_body_and_related(self, client) -> None:
        resp = client.get("/articles/intro")
        html = resp.get_data(as_text=True)

        assert resp.status_code == 200
        assert "<h1>Hello</h1>" in html
        assert 'href="/articles/intro-part-2"' in html

    def test_archived_reachable(self, client) -> None:
        resp = client.get("/articles/old-news")
        assert resp.status_code == 200
        assert "This article is archived." in resp.get_data(as_text=True)

    def test_missing_is_404(self, client) -> None:
        resp = client.get("/articles/nope")
        assert resp.status_code == 404
        assert "Not found" in resp.get_data(as_text=True)


class TestPages:
    def test_about(self, client) -> None:
        html = client.get("/about").get_data(as_text=True)
        assert "About me" in html
        assert "<strong>there</strong>" in html

    def test_sitemap(self, client) -> None:
        resp = client.get("/sitemap.xml")
        xml = resp.get_data(as_text=True)

        assert resp.mimetype == "application/xml"
        assert f"<loc>{config.SITE_URL}/articles/intro</loc>" in xml
        assert "old-news" not in xml

    def test_theme_variables_in_layout(self, client) -> None:
        html = client.get("/about").get_data(as_text=True)
        assert "--latte-base: #eff1f5;" in html


class TestAppSetup:
    def test_no_session_secret(self) -> None:
        """The site keeps no session state, so no secret key is configured."""
        assert blog_app.app.secret_key is None
        assert not hasattr(config, "SECRET_KEY")

    def test_broken_content_file_is_a_content_error(self, client, monkeypatch, tmp_path) -> None:
        path = tmp_path / "articles.json"
        path.write_text("{not json", encoding="utf-8")
        monkeypatch.setattr(config, "DATA_PATH", path)

        with pytest.raises(ContentError):
            blog_app.load_articles()
