"""Tests for the shared page frame and page fragments."""

import re
from datetime import date

import pytest

from blog.adapters.composition.jinja_composer import JinjaPageComposer, display_date
from blog.domain.errors import ConfigurationError
from blog.domain.models import Article, SiteMetadata
from blog.settings import Head, Theme


def _title(html: str) -> str:
    match = re.search(r"<title>(.*?)</title>", html, re.DOTALL)
    assert match is not None
    return match.group(1)


def _container(html: str) -> str:
    match = re.search(r'<main class="container">(.*?)</main>', html, re.DOTALL)
    assert match is not None
    return match.group(1)


class TestCompose:
    def test_title_tag_and_content(self, composer, site):
        html = composer.compose(site, "<p>Hello</p>")
        assert _title(html) == "Fahad Almusharraf - Website"
        assert _container(html) == "<p>Hello</p>"

    @pytest.mark.parametrize("content", [None, "", "<p>x</p>", "<pre><code>a < b</code></pre>"])
    def test_title_matches_site_title_for_any_content(self, composer, site, content):
        assert _title(composer.compose(site, content)) == site.title

    def test_compose_is_pure(self, composer, site):
        assert composer.compose(site, "<p>Hello</p>") == composer.compose(site, "<p>Hello</p>")

    def test_omitted_content_renders_frame_with_empty_container(self, composer, site):
        html = composer.compose(site)
        assert '<header class="header">' in html
        assert "Fahad Almusharraf</a>" in html
        assert '<main class="container"></main>' in html

    def test_meta_tags_use_defaults(self, composer, site):
        html = composer.compose(site)
        assert '<meta name="description" content="Personal website">' in html
        assert '<meta name="keywords" content="blog, showcase, personal">' in html

    def test_background_color_and_link_colors(self, site):
        composer = JinjaPageComposer(theme=Theme(dark="#111111", black="#000000", lightest="#eeeeee"))
        html = composer.compose(site)
        assert "background-color: #eeeeee;" in html
        assert "color: #111111;" in html
        assert "max-width: 800px;" in html

    def test_head_stylesheets_and_scripts(self, site):
        composer = JinjaPageComposer(head=Head(stylesheets=("/prism.css",), scripts=("/prism.js",)))
        html = composer.compose(site)
        assert '<link rel="stylesheet" href="/prism.css">' in html
        assert '<script src="/prism.js"></script>' in html

    def test_site_title_is_escaped(self, composer):
        html = composer.compose(SiteMetadata(title="Tom & <Jerry>", author="T"))
        assert "<title>Tom &amp; &lt;Jerry&gt;</title>" in html

    def test_child_content_is_not_escaped(self, composer, site):
        html = composer.compose(site, '<a href="/x/">x</a>')
        assert '<a href="/x/">x</a>' in _container(html)

    def test_missing_site_metadata_fails_fast(self, composer):
        with pytest.raises(ConfigurationError):
            composer.compose(None, "<p>Hello</p>")


class TestFragments:
    def test_article_fragment(self, composer):
        article = Article(
            title="Intercepting <things>",
            date=date(2018, 3, 4),
            body="",
            slug="intercepting",
            tags=("c", "tls"),
        )
        html = composer.article_fragment(article, "<p>Body</p>")
        assert '<h1 class="article-title">Intercepting &lt;things&gt;</h1>' in html
        assert 'datetime="2018-03-04"' in html
        assert "March 04, 2018" in html
        assert "<li>tls</li>" in html
        assert '<div class="article-body"><p>Body</p></div>' in html

    def test_article_fragment_with_empty_body(self, composer):
        article = Article(title="Empty", date=date(2020, 1, 1), body="", slug="empty")
        html = composer.article_fragment(article, "")
        assert '<div class="article-body"></div>' in html
        assert "article-tags" not in html

    def test_index_fragment_lists_articles_in_given_order(self, composer, site):
        articles = [
            Article(title="Newer", date=date(2019, 1, 1), body="", slug="newer"),
            Article(title="Older", date=date(2018, 1, 1), body="", slug="older"),
        ]
        html = composer.index_fragment(site, articles)
        assert html.index('href="/newer/"') < html.index('href="/older/"')

    def test_index_fragment_without_articles(self, composer, site):
        assert "Nothing published yet." in composer.index_fragment(site, [])


def test_display_date():
    assert display_date(date(2018, 1, 20)) == "January 20, 2018"
