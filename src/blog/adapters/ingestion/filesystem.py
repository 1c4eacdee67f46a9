from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from blog.adapters.ingestion.loaders.markdown_loader import MarkdownArticleLoader
from blog.domain.errors import ContentError
from blog.domain.models import Article, IngestReport

logger = logging.getLogger(__name__)


def _is_hidden(path: Path, root: Path) -> bool:
    try:
        parts = path.relative_to(root).parts
    except ValueError:
        parts = path.parts
    return any(part.startswith(".") for part in parts)


def _iter_files(inputs: Sequence[str], *, recursive: bool) -> list[tuple[Path, Path]]:
    """
    Expand inputs into (file, root) pairs. Inputs may be directories or files.
    """
    files: dict[Path, Path] = {}

    for inp in inputs:
        p = Path(inp).expanduser()
        if not p.exists():
            logger.warning("Content input does not exist: %s", p)
            continue

        if p.is_dir():
            root = p.resolve()
            it = p.rglob("*") if recursive else p.glob("*")
            for x in it:
                if x.is_file():
                    files.setdefault(x.resolve(), root)
        elif p.is_file():
            files.setdefault(p.resolve(), p.resolve().parent)

    # Stable, deterministic ordering
    return sorted(files.items(), key=lambda item: str(item[0]))


def sort_articles(articles: Sequence[Article]) -> list[Article]:
    """Newest first; ties broken by slug so builds are reproducible."""
    by_slug = sorted(articles, key=lambda a: a.slug)
    return sorted(by_slug, key=lambda a: a.date, reverse=True)


@dataclass(frozen=True, slots=True)
class FilesystemContentSource:
    allowed_extensions: set[str] = field(default_factory=lambda: {".md", ".markdown"})
    recursive: bool = True
    skip_hidden: bool = True
    strict: bool = False

    loader: MarkdownArticleLoader = field(default_factory=MarkdownArticleLoader)

    def discover(self, inputs: Sequence[str]) -> tuple[list[Article], IngestReport]:
        scanned = loaded = 0
        skipped_hidden = skipped_extension = skipped_empty = failed = 0
        by_ext: dict[str, int] = {}

        articles: list[Article] = []
        seen_slugs: dict[str, str] = {}

        for path, root in _iter_files(inputs, recursive=self.recursive):
            scanned += 1

            if self.skip_hidden and _is_hidden(path, root):
                skipped_hidden += 1
                continue

            ext = path.suffix.lower()
            if self.allowed_extensions and ext not in self.allowed_extensions:
                skipped_extension += 1
                continue

            try:
                article = self.loader.load(path)
            except ContentError as e:
                if self.strict:
                    raise
                logger.warning("Skipping article: %s", e)
                failed += 1
                continue

            if article is None:
                skipped_empty += 1
                continue

            if article.slug in seen_slugs:
                msg = f"Duplicate slug {article.slug!r}: {path} and {seen_slugs[article.slug]}"
                if self.strict:
                    raise ContentError(msg)
                logger.warning("Skipping article: %s", msg)
                failed += 1
                continue

            seen_slugs[article.slug] = str(path)
            articles.append(article)
            loaded += 1
            by_ext[ext] = by_ext.get(ext, 0) + 1

        report = IngestReport(
            scanned=scanned,
            loaded=loaded,
            skipped_hidden=skipped_hidden,
            skipped_extension=skipped_extension,
            skipped_empty=skipped_empty,
            failed=failed,
            by_extension=dict(by_ext),
        )
        logger.info("Discovered %d article(s) out of %d scanned file(s)", loaded, scanned)
        return sort_articles(articles), report
