from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from srcbundle.errors import BundleError, BundleIOError
from srcbundle.io.writer import ensure_parent_dir, write_output
from srcbundle.manifest.loader import Reporter, load_manifest
from srcbundle.utils.config import BundleConfig


@dataclass
class BundleResult:
    destination: Path
    sources: List[Path] = field(default_factory=list)
    lines: int = 0
    bytes: int = 0


def _strip_terminator(line: str) -> str:
    # Universal-newline reads turn "\r\n" and "\r" into "\n", so a line holds
    # at most one "\n" and it is always last.
    return line[:-1] if line.endswith("\n") else line


def concat_sources(sources: Iterable[str | Path], encoding: str = "utf-8") -> str:
    chunks: List[str] = []
    for source in sources:
        with open(source, "r", encoding=encoding) as f:
            for line in f:
                chunks.append(_strip_terminator(line))
                chunks.append("\n")
    return "".join(chunks)


def bundle(
    destination: str | Path,
    manifest_path: str | Path,
    config: Optional[BundleConfig] = None,
    report: Optional[Reporter] = print,
) -> BundleResult:
    """Concatenate every file listed in a manifest into ``destination``.

    Nothing is written to ``destination`` unless every listed file exists and
    has been read. The destination's parent directory is created first, so it
    can be left behind by a failed run.
    """
    cfg = config or BundleConfig()
    if cfg.quiet:
        report = None
    destination = Path(destination)

    try:
        ensure_parent_dir(destination)
        manifest = load_manifest(manifest_path, encoding=cfg.encoding, report=report)
        text = concat_sources(manifest.sources, encoding=cfg.encoding)
        written = write_output(destination, text, encoding=cfg.encoding)
    except BundleError:
        raise
    except (OSError, UnicodeError) as exc:
        raise BundleIOError(f"Bundling into {destination} failed: {exc}") from exc

    return BundleResult(
        destination=destination,
        sources=list(manifest.sources),
        lines=text.count("\n"),
        bytes=written,
    )
