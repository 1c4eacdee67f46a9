from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from blog.domain.models import BuildReport, RenderedPage


class Publisher(Protocol):
    """
    Persists rendered pages somewhere outside the build (filesystem, bucket, ...).
    """

    def publish(self, pages: Sequence[RenderedPage]) -> list[Path]:
        ...

    def write_manifest(self, report: BuildReport) -> Path:
        ...
