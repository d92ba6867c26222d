from __future__ import annotations

from pathlib import Path


def ensure_parent_dir(destination: str | Path) -> bool:
    """Create the destination's parent directory if it is missing.

    Only one level is created. Returns True when a directory was made.
    """
    parent = Path(destination).parent
    if str(parent) in ("", ".") or parent.exists():
        return False
    parent.mkdir()
    return True


def write_output(destination: str | Path, text: str, encoding: str = "utf-8") -> int:
    data = text.encode(encoding)
    # Binary mode keeps "\n" terminators as-is on every platform.
    with open(destination, "wb") as f:
        f.write(data)
    return len(data)
