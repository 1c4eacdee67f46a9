from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from blog.domain.errors import ContentError


# -------------------------
# Site-wide objects
# -------------------------

@dataclass(frozen=True, slots=True)
class SiteMetadata:
    """
    Global description of the site. Loaded once from settings, never mutated.
    """
    title: str
    author: str


# -------------------------
# Content objects
# -------------------------

@dataclass(frozen=True, slots=True)
class Article:
    """
    One authored markdown document.

    body is markdown source (possibly empty); slug is the URL path segment
    the article is published under.
    """
    title: str
    date: date
    body: str
    slug: str
    tags: Sequence[str] = field(default_factory=tuple)
    source_path: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.title, str) or not self.title.strip():
            raise ContentError(f"Article has no title: {self.source_path or self.slug}")
        if not isinstance(self.date, date):
            raise ContentError(f"Article has no valid date: {self.source_path or self.slug}")


# -------------------------
# Page objects
# -------------------------

@dataclass(frozen=True, slots=True)
class Page:
    """
    Child content for one output document, before the shared frame is applied.

    path is relative to the output root ("" for the home page).
    content is already-rendered markup.
    """
    path: str
    title: str
    content: str = ""
    article: Optional[Article] = None


@dataclass(frozen=True, slots=True)
class RenderedPage:
    path: str
    html: str


# -------------------------
# Build reports
# -------------------------

@dataclass(frozen=True, slots=True)
class IngestReport:
    scanned: int = 0
    loaded: int = 0
    skipped_hidden: int = 0
    skipped_extension: int = 0
    skipped_empty: int = 0
    failed: int = 0
    by_extension: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class BuildReport:
    site: SiteMetadata
    article_count: int
    page_count: int
    written: Sequence[str] = field(default_factory=tuple)
    dry_run: bool = False
    ingest: IngestReport = field(default_factory=IngestReport)
