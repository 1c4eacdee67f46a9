from __future__ import annotations

from dataclasses import dataclass

from blog.adapters.composition.jinja_composer import JinjaPageComposer
from blog.adapters.ingestion.filesystem import FilesystemContentSource
from blog.adapters.publishing.filesystem_publisher import FilesystemPublisher
from blog.adapters.rendering.markdown_renderer import PythonMarkdownRenderer
from blog.ports import ContentSource, MarkdownRenderer, PageComposer, Publisher
from blog.settings import Settings


@dataclass(frozen=True, slots=True)
class Container:
    """
    Lightweight dependency container.
    Holds the adapters wired for one build.
    """
    content_source: ContentSource
    renderer: MarkdownRenderer
    composer: PageComposer
    publisher: Publisher


def build_container(settings: Settings, *, strict: bool = False) -> Container:
    return Container(
        content_source=FilesystemContentSource(strict=strict),
        renderer=PythonMarkdownRenderer(
            extensions=settings.markdown.extensions,
            lang_prefix=settings.markdown.lang_prefix,
        ),
        composer=JinjaPageComposer(head=settings.head, theme=settings.theme),
        publisher=FilesystemPublisher(output_dir=settings.paths.output_dir),
    )
