from __future__ import annotations

import argparse
import logging
import logging.config
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from rich import print as rprint

from blog.app.container import build_container
from blog.app.pipeline import build_site
from blog.config import LOG_LEVEL, SETTINGS_PATH
from blog.domain.errors import BlogError
from blog.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "plain",
                },
            },
            "root": {"level": level.upper(), "handlers": ["console"]},
        }
    )


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="blog", description="Build the static blog from markdown articles.")
    sub = ap.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Render every article and the home page.")
    build.add_argument("--settings", default=SETTINGS_PATH, help=f"Settings file (default: {SETTINGS_PATH})")
    build.add_argument("--content", default=None, help="Override paths.content_dir")
    build.add_argument("--output", default=None, help="Override paths.output_dir")
    build.add_argument("--strict", action="store_true", help="Fail on the first invalid article instead of skipping it")
    build.add_argument("--dry-run", action="store_true", help="Compose pages without writing anything")
    build.add_argument("--verbose", "-v", action="store_true", help="Log at DEBUG level")
    return ap


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    paths = settings.paths
    if args.content:
        paths = replace(paths, content_dir=Path(args.content).expanduser().resolve())
    if args.output:
        paths = replace(paths, output_dir=Path(args.output).expanduser().resolve())
    return replace(settings, paths=paths)


def run_build(args: argparse.Namespace) -> int:
    settings = apply_overrides(load_settings(args.settings), args)
    container = build_container(settings, strict=args.strict)
    report = build_site(settings, container=container, dry_run=args.dry_run)

    rprint(f"[bold]{report.site.title}[/bold]")
    rprint(f"  articles: {report.article_count}")
    rprint(f"  pages:    {report.page_count}")
    if report.ingest.failed:
        rprint(f"  [yellow]skipped invalid: {report.ingest.failed}[/yellow]")
    if report.dry_run:
        rprint("[yellow]Dry run enabled, nothing written[/yellow]")
    else:
        rprint(f"  output:   {settings.paths.output_dir}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else LOG_LEVEL)

    try:
        return run_build(args)
    except BlogError as e:
        logger.debug("Build failed", exc_info=True)
        rprint(f"[red]Build failed:[/red] {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
