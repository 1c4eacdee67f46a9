from __future__ import annotations

import re
import unicodedata
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple

import yaml

_SLUG_STRIP_RE = re.compile(r"[^\w\s-]")
_SLUG_DASH_RE = re.compile(r"[-\s_]+")


def split_frontmatter(raw_text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a markdown document into front-matter and body.

    Args:
        raw_text (str): The file contents, optionally starting with a '---' fenced YAML block.

    Returns:
        (tuple[dict[str, Any], str]): The decoded front-matter (empty if absent or not a mapping)
        and the remaining body.

    Raises:
        yaml.YAMLError, ValueError: The block is not valid YAML, or holds an impossible
        timestamp such as 2018-13-45.
    """
    # Normalize newlines and strip BOM if present
    s = raw_text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")

    lines = s.split("\n")
    if not lines or lines[0].strip() != "---":
        return {}, s

    end_idx = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end_idx = i
            break

    if end_idx is None:
        # No closing fence: treat as no front-matter
        return {}, s

    frontmatter_text = "\n".join(lines[1:end_idx]).strip()
    body = "\n".join(lines[end_idx + 1:]).lstrip("\n")

    frontmatter = yaml.safe_load(frontmatter_text) or {}
    if not isinstance(frontmatter, dict):
        frontmatter = {}

    return frontmatter, body


def normalize_tags(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        # Allow "a, b" or "a"
        parts = [p.strip() for p in value.split(",")]
        return [p for p in parts if p]
    if isinstance(value, list):
        return [x.strip() for x in value if isinstance(x, str) and x.strip()]
    return []


def parse_date(value: Any) -> Optional[date]:
    """
    Coerce a front-matter date into a calendar date.

    YAML already decodes bare ISO dates; quoted strings and timestamps are handled here.
    Returns None when the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


def slugify(text: str) -> str:
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = _SLUG_STRIP_RE.sub("", text).strip().lower()
    return _SLUG_DASH_RE.sub("-", text).strip("-")
