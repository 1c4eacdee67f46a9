from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape
from markupsafe import Markup

from blog.domain.errors import ConfigurationError, RenderError
from blog.domain.models import Article, SiteMetadata
from blog.domain.schema import DATE_DISPLAY_FORMAT
from blog.settings import Head, Theme

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

LAYOUT_TEMPLATE = "layout.html.jinja"
ARTICLE_TEMPLATE = "article.html.jinja"
INDEX_TEMPLATE = "index.html.jinja"


def display_date(value: date) -> str:
    return value.strftime(DATE_DISPLAY_FORMAT)


@lru_cache(maxsize=None)
def _environment(templates_dir: str) -> Environment:
    env = Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(enabled_extensions=("html", "jinja")),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["display_date"] = display_date
    return env


@dataclass(frozen=True, slots=True)
class JinjaPageComposer:
    """
    Renders the shared page frame and the per-page fragments from Jinja2 templates.

    Child content handed to compose() is already-rendered markup and is inserted
    verbatim; every other value is escaped.
    """
    head: Head = field(default_factory=Head)
    theme: Theme = field(default_factory=Theme)
    templates_dir: Path = TEMPLATES_DIR

    def _render(self, template_name: str, **context: Any) -> str:
        env = _environment(str(self.templates_dir))
        try:
            return env.get_template(template_name).render(**context)
        except TemplateError as e:
            raise RenderError(f"Failed to render {template_name}: {e}") from e

    def compose(self, site: Optional[SiteMetadata], content: Optional[str] = None) -> str:
        if site is None:
            raise ConfigurationError("Site metadata is required to compose a page")
        return self._render(
            LAYOUT_TEMPLATE,
            site=site,
            head=self.head,
            theme=self.theme,
            content=Markup(content or ""),
        )

    def article_fragment(self, article: Article, body_html: str) -> str:
        return self._render(ARTICLE_TEMPLATE, article=article, body=Markup(body_html or ""))

    def index_fragment(self, site: SiteMetadata, articles: Sequence[Article]) -> str:
        return self._render(INDEX_TEMPLATE, site=site, articles=list(articles))
