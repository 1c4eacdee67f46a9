from pathlib import Path

import pytest

from blog.adapters.composition.jinja_composer import JinjaPageComposer
from blog.domain.models import SiteMetadata


@pytest.fixture
def site() -> SiteMetadata:
    return SiteMetadata(title="Fahad Almusharraf - Website", author="Fahad Almusharraf")


@pytest.fixture
def composer() -> JinjaPageComposer:
    return JinjaPageComposer()


@pytest.fixture
def write_article(tmp_path):
    """Write a markdown file under tmp_path/content and return its path."""
    def _write(relative: str, text: str) -> Path:
        path = tmp_path / "content" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text(
        '[site]\n'
        'title = "Fahad Almusharraf - Website"\n'
        'author = "Fahad Almusharraf"\n'
        '\n'
        '[paths]\n'
        'content_dir = "content"\n'
        'output_dir = "public"\n',
        encoding="utf-8",
    )
    (tmp_path / "content").mkdir(exist_ok=True)
    return path
