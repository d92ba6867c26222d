from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

from srcbundle.errors import MissingInputError, MissingManifestError

Reporter = Callable[[str], None]


@dataclass
class Manifest:
    path: Path
    entries: List[str] = field(default_factory=list)
    sources: List[Path] = field(default_factory=list)


def iter_entries(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        entry = line.strip()
        if entry:
            yield entry


def load_manifest(
    manifest_path: str | Path,
    encoding: str = "utf-8",
    report: Optional[Reporter] = None,
) -> Manifest:
    """Parse a manifest and check that every listed file exists.

    Entries are validated as they are read, so the first missing file stops
    parsing. Relative entries resolve against the working directory.
    """
    manifest_path = Path(manifest_path)
    if not manifest_path.is_file():
        raise MissingManifestError(manifest_path)

    manifest = Manifest(path=manifest_path)
    with open(manifest_path, "r", encoding=encoding) as f:
        for entry in iter_entries(f):
            if report is not None:
                report(f"Reading {entry}")
            source = Path(entry)
            if not source.exists():
                raise MissingInputError(entry)
            manifest.entries.append(entry)
            manifest.sources.append(source)
    return manifest
