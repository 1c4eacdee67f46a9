from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import markdown

from blog.domain.schema import DEFAULT_LANG_PREFIX, DEFAULT_MARKDOWN_EXTENSIONS


@dataclass(frozen=True, slots=True)
class PythonMarkdownRenderer:
    """
    Markdown -> HTML via Python-Markdown.

    Fenced blocks tagged with a language come out as
    <code class="{lang_prefix}{lang}"> so a Prism theme can highlight them.
    """
    extensions: tuple[str, ...] = DEFAULT_MARKDOWN_EXTENSIONS
    lang_prefix: str = DEFAULT_LANG_PREFIX
    extension_configs: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    def _configs(self) -> dict[str, dict[str, Any]]:
        configs = {name: dict(cfg) for name, cfg in self.extension_configs.items()}
        if "fenced_code" in self.extensions:
            configs.setdefault("fenced_code", {}).setdefault("lang_prefix", self.lang_prefix)
        return configs

    def render(self, text: str) -> str:
        if not text or not text.strip():
            return ""
        # A fresh converter per call keeps rendering free of state between articles
        md = markdown.Markdown(extensions=list(self.extensions), extension_configs=self._configs())
        return md.convert(text)
