from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from blog.domain.errors import ConfigurationError
from blog.domain.models import SiteMetadata
from blog.domain.schema import (
    DEFAULT_DESCRIPTION,
    DEFAULT_KEYWORDS,
    DEFAULT_LANG_PREFIX,
    DEFAULT_MARKDOWN_EXTENSIONS,
)


@dataclass(frozen=True)
class Paths:
    content_dir: Path
    output_dir: Path


@dataclass(frozen=True)
class MarkdownOptions:
    extensions: tuple[str, ...] = DEFAULT_MARKDOWN_EXTENSIONS
    lang_prefix: str = DEFAULT_LANG_PREFIX


@dataclass(frozen=True)
class Head:
    description: str = DEFAULT_DESCRIPTION
    keywords: str = DEFAULT_KEYWORDS
    stylesheets: tuple[str, ...] = ()
    scripts: tuple[str, ...] = ()


@dataclass(frozen=True)
class Theme:
    dark: str = "#333333"
    black: str = "#000000"
    lightest: str = "#fafafa"


@dataclass(frozen=True)
class Settings:
    site: SiteMetadata
    paths: Paths
    markdown: MarkdownOptions = field(default_factory=MarkdownOptions)
    head: Head = field(default_factory=Head)
    theme: Theme = field(default_factory=Theme)


def _str_tuple(value: Any, key: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"Config key {key} must be a list of strings")
    return tuple(value)


def _table(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    if not isinstance(value, dict):
        raise ConfigurationError(f"Config key {name} must be a table: [{name}]")
    return value


def load_settings(path: str | Path = "settings.toml") -> Settings:
    """
    Read settings.toml. [site] title/author are required; the rest has defaults.
    Relative paths resolve against the settings file's directory.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Missing config file: {path}")

    try:
        with path.open("rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e

    base = path.resolve().parent

    def expand(p: str) -> Path:
        expanded = Path(os.path.expandvars(os.path.expanduser(p)))
        return (expanded if expanded.is_absolute() else base / expanded).resolve()

    site_raw = raw.get("site")
    if not isinstance(site_raw, dict):
        raise ConfigurationError("Missing config table: [site]")

    try:
        site = SiteMetadata(
            title=str(site_raw["title"]),
            author=str(site_raw["author"]),
        )
    except KeyError as e:
        raise ConfigurationError(f"Missing config key: site.{e.args[0]}") from e

    if not site.title.strip():
        raise ConfigurationError("Config key site.title must not be empty")

    paths_raw = _table(raw, "paths")
    md_raw = _table(raw, "markdown")
    head_raw = _table(raw, "head")
    theme_raw = _table(raw, "theme")

    markdown_defaults = MarkdownOptions()
    head_defaults = Head()
    theme_defaults = Theme()

    return Settings(
        site=site,
        paths=Paths(
            content_dir=expand(paths_raw.get("content_dir", "content")),
            output_dir=expand(paths_raw.get("output_dir", "public")),
        ),
        markdown=MarkdownOptions(
            extensions=_str_tuple(md_raw["extensions"], "markdown.extensions")
            if "extensions" in md_raw else markdown_defaults.extensions,
            lang_prefix=str(md_raw.get("lang_prefix", markdown_defaults.lang_prefix)),
        ),
        head=Head(
            description=str(head_raw.get("description", head_defaults.description)),
            keywords=str(head_raw.get("keywords", head_defaults.keywords)),
            stylesheets=_str_tuple(head_raw.get("stylesheets", []), "head.stylesheets"),
            scripts=_str_tuple(head_raw.get("scripts", []), "head.scripts"),
        ),
        theme=Theme(
            dark=str(theme_raw.get("dark", theme_defaults.dark)),
            black=str(theme_raw.get("black", theme_defaults.black)),
            lightest=str(theme_raw.get("lightest", theme_defaults.lightest)),
        ),
    )
