from .composer import PageComposer
from .content_source import ContentSource
from .publisher import Publisher
from .renderer import MarkdownRenderer

__all__ = [
    "ContentSource",
    "MarkdownRenderer",
    "PageComposer",
    "Publisher",
]
