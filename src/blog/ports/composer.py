from __future__ import annotations

from typing import Optional, Protocol, Sequence

from blog.domain.models import Article, SiteMetadata


class PageComposer(Protocol):
    """
    Wraps page content in the shared frame (head tags, header, container).
    Implementations must be pure: same inputs, same output.
    """

    def compose(self, site: Optional[SiteMetadata], content: Optional[str] = None) -> str:
        ...

    def article_fragment(self, article: Article, body_html: str) -> str:
        ...

    def index_fragment(self, site: SiteMetadata, articles: Sequence[Article]) -> str:
        ...
