from __future__ import annotations

from typing import Protocol, Sequence

from blog.domain.models import Article, IngestReport


class ContentSource(Protocol):
    """
    Discovers markdown files under the given inputs and turns them into Articles.
    """

    def discover(self, inputs: Sequence[str]) -> tuple[list[Article], IngestReport]:
        ...
