from __future__ import annotations

import logging
from typing import Optional, Sequence

from blog.app.container import Container
from blog.domain.errors import ConfigurationError
from blog.domain.models import Article, BuildReport, Page, RenderedPage, SiteMetadata
from blog.ports import MarkdownRenderer, PageComposer
from blog.settings import Settings

logger = logging.getLogger(__name__)

INDEX_PATH = ""


def resolve_article(article: Article, *, renderer: MarkdownRenderer, composer: PageComposer) -> Page:
    body_html = renderer.render(article.body)
    return Page(
        path=article.slug,
        title=article.title,
        content=composer.article_fragment(article, body_html),
        article=article,
    )


def index_page(site: SiteMetadata, articles: Sequence[Article], *, composer: PageComposer) -> Page:
    return Page(path=INDEX_PATH, title=site.title, content=composer.index_fragment(site, articles))


def compose_page(page: Page, site: Optional[SiteMetadata], *, composer: PageComposer) -> RenderedPage:
    return RenderedPage(path=page.path, html=composer.compose(site, page.content))


def render_site(site: SiteMetadata, articles: Sequence[Article], *, container: Container) -> list[RenderedPage]:
    """
    Home page first, then one page per article in the order given.
    """
    pages = [index_page(site, articles, composer=container.composer)]
    pages.extend(
        resolve_article(a, renderer=container.renderer, composer=container.composer)
        for a in articles
    )
    return [compose_page(p, site, composer=container.composer) for p in pages]


def build_site(
    settings: Optional[Settings],
    *,
    container: Container,
    dry_run: bool = False,
) -> BuildReport:
    if settings is None or settings.site is None:
        raise ConfigurationError("Site metadata is required to build the site")

    articles, ingest = container.content_source.discover([str(settings.paths.content_dir)])
    rendered = render_site(settings.site, articles, container=container)

    written: list[str] = []
    if dry_run:
        logger.info("Dry run: composed %d page(s), nothing written", len(rendered))
    else:
        written = [str(p) for p in container.publisher.publish(rendered)]

    report = BuildReport(
        site=settings.site,
        article_count=len(articles),
        page_count=len(rendered),
        written=tuple(written),
        dry_run=dry_run,
        ingest=ingest,
    )

    if not dry_run:
        manifest = container.publisher.write_manifest(report)
        logger.info("Built %d page(s) into %s", len(rendered), manifest.parent)

    return report
