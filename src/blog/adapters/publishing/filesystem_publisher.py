from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Sequence

from blog.domain.errors import PublishError
from blog.domain.models import BuildReport, RenderedPage

logger = logging.getLogger(__name__)

MANIFEST_FILE = "manifest.json"


def _json_default(x: Any) -> Any:
    if isinstance(x, (datetime, date)):
        return x.isoformat()
    if isinstance(x, Path):
        return str(x)
    if isinstance(x, (set, frozenset)):
        return sorted(str(v) for v in x)
    return str(x)


def _atomic_write(target: Path, text: str) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp_file = target.with_name(target.name + ".tmp")
    try:
        with tmp_file.open("w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
        tmp_file.replace(target)
    except OSError:
        tmp_file.unlink(missing_ok=True)
        raise


@dataclass(frozen=True, slots=True)
class FilesystemPublisher:
    """
    Writes pages as <output_dir>/<page.path>/index.html so every page has a clean URL.

    Files are written to a temp file first and then swapped in, so a failed build
    never leaves a truncated page behind.
    """
    output_dir: Path

    def target_for(self, page: RenderedPage) -> Path:
        rel = page.path.strip("/")
        target = (self.output_dir / rel / "index.html").resolve()
        root = self.output_dir.resolve()
        if root != target.parent and root not in target.parents:
            raise PublishError(f"Page path escapes the output directory: {page.path!r}")
        return target

    def publish(self, pages: Sequence[RenderedPage]) -> list[Path]:
        written: list[Path] = []
        for page in pages:
            target = self.target_for(page)
            try:
                _atomic_write(target, page.html)
            except OSError as e:
                raise PublishError(f"Could not write {target}: {e}") from e
            logger.debug("Wrote %s", target)
            written.append(target)
        return written

    def write_manifest(self, report: BuildReport) -> Path:
        manifest = {
            "created_at": datetime.now(timezone.utc).isoformat(),
            "output_dir": str(self.output_dir),
            **asdict(report),
        }
        target = self.output_dir / MANIFEST_FILE
        try:
            _atomic_write(target, json.dumps(manifest, indent=2, ensure_ascii=False, default=_json_default))
        except OSError as e:
            raise PublishError(f"Could not write {target}: {e}") from e
        return target
