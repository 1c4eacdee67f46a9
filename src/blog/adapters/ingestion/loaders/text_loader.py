from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def _looks_binary(data: bytes) -> bool:
    if b"\x00" in data:
        return True
    sample = data[:4096]
    if not sample:
        return False
    control = sum(1 for b in sample if b < 9 or (13 < b < 32))
    return control / len(sample) > 0.02


@dataclass(frozen=True, slots=True)
class TextLoader:
    """
    Reads an article file from disk as text.

    utf-8 first, latin-1 as a fallback. Oversized and binary files yield None.
    """
    max_bytes: int = 2_000_000
    prefer_encoding: str = "utf-8"
    fallback_encoding: str = "latin-1"

    def load(self, path: Path) -> Optional[str]:
        try:
            if path.stat().st_size > self.max_bytes:
                logger.warning("Skipping %s: larger than %d bytes", path, self.max_bytes)
                return None
            data = path.read_bytes()
        except OSError as e:
            logger.warning("Could not read %s: %s", path, e)
            return None

        if _looks_binary(data):
            logger.warning("Skipping %s: looks like a binary file", path)
            return None

        try:
            return data.decode(self.prefer_encoding)
        except UnicodeDecodeError:
            return data.decode(self.fallback_encoding, errors="replace")
