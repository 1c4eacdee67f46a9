from __future__ import annotations

from typing import Final

# Front-matter keys read from article files
FM_TITLE: Final[str] = "title"
FM_DATE: Final[str] = "date"
FM_PATH: Final[str] = "path"
FM_TAGS: Final[str] = "tags"

# Defaults for the shared page frame
DEFAULT_DESCRIPTION: Final[str] = "Personal website"
DEFAULT_KEYWORDS: Final[str] = "blog, showcase, personal"
DEFAULT_LANG_PREFIX: Final[str] = "language-"
DEFAULT_MARKDOWN_EXTENSIONS: Final[tuple[str, ...]] = ("fenced_code", "tables")

DATE_DISPLAY_FORMAT: Final[str] = "%B %d, %Y"

# Output names an article slug may not take
RESERVED_SLUGS: Final[frozenset[str]] = frozenset({"manifest.json", "index.html"})
