from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from blog.adapters.ingestion.loaders.text_loader import TextLoader
from blog.domain.errors import ContentError
from blog.domain.models import Article
from blog.domain.schema import FM_DATE, FM_PATH, FM_TAGS, FM_TITLE, RESERVED_SLUGS
from blog.utils.parsing import normalize_tags, parse_date, slugify, split_frontmatter


def article_slug(frontmatter: dict, path: Path) -> str:
    """
    Use the front-matter `path` ("/hello-world/") when present, else the file stem.
    Files named index.md take their directory's name.
    """
    explicit = frontmatter.get(FM_PATH)
    if isinstance(explicit, str) and explicit.strip("/ "):
        return check_slug(explicit.strip("/ "), path)
    stem = path.parent.name if path.stem.lower() == "index" else path.stem
    return slugify(stem) or "post"


def check_slug(slug: str, path: Path) -> str:
    """Slugs must stay inside the output directory and clear of build files."""
    segments = slug.split("/")
    if "\\" in slug or any(s in ("", ".", "..") for s in segments):
        raise ContentError(f"Invalid front-matter path in {path}: {slug!r}")
    if segments[0].lower() in RESERVED_SLUGS:
        raise ContentError(f"Front-matter path in {path} clashes with a build file: {slug!r}")
    return slug


def parse_article(raw: str, path: Path) -> Article:
    try:
        frontmatter, body = split_frontmatter(raw)
    except (yaml.YAMLError, ValueError) as e:
        raise ContentError(f"Invalid front-matter in {path}: {e}") from e

    title = frontmatter.get(FM_TITLE)
    if title is None or not str(title).strip():
        raise ContentError(f"Missing front-matter title in {path}")

    published = parse_date(frontmatter.get(FM_DATE))
    if published is None:
        raise ContentError(f"Missing or invalid front-matter date in {path}: {frontmatter.get(FM_DATE)!r}")

    return Article(
        title=str(title).strip(),
        date=published,
        body=body,
        slug=article_slug(frontmatter, path),
        tags=tuple(normalize_tags(frontmatter.get(FM_TAGS))),
        source_path=str(path),
    )


@dataclass(frozen=True, slots=True)
class MarkdownArticleLoader:
    """
    Loads one markdown file with YAML front-matter into an Article.

    Returns None when the file cannot be read; raises ContentError when the
    front-matter lacks a title or a valid date.
    """
    text_loader: TextLoader = field(default_factory=TextLoader)

    def load(self, path: Path) -> Optional[Article]:
        raw = self.text_loader.load(path)
        if raw is None:
            return None
        return parse_article(raw, path)
