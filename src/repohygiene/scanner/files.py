"""File-set enumeration by include/exclude globs, and safe file reading."""

from __future__ import annotations

import os
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, List, Optional

from repohygiene.config.defaults import DEFAULT_EXCLUDES, DEFAULT_INCLUDES


class FileSkipped(Exception):
    """Raised by :func:`read_text` for files that should not be scanned."""


def matches_glob(rel_path: str, pattern: str) -> bool:
    """Match a POSIX relative path against a glob.

    ``*`` crosses directory separators (fnmatch semantics). ``**/x``
    also matches ``x`` at the root, and patterns without a ``/`` are tried
    against the basename as well.
    """
    if fnmatch(rel_path, pattern):
        return True
    if pattern.startswith("**/") and fnmatch(rel_path, pattern[3:]):
        return True
    if "/" not in pattern:
        return fnmatch(rel_path.rsplit("/", 1)[-1], pattern)
    return False


def matches_any(rel_path: str, patterns: Iterable[str]) -> bool:
    return any(matches_glob(rel_path, p) for p in patterns)


def _dir_excluded(rel_dir: str, exclude: Iterable[str]) -> bool:
    # Only "<dir>/**" globs prune; "*.map" must not drop a directory "foo.map".
    for pattern in exclude:
        if not pattern.endswith("/**"):
            continue
        dir_glob = pattern[:-3]
        if fnmatch(rel_dir, dir_glob):
            return True
        if dir_glob.startswith("**/") and fnmatch(rel_dir, dir_glob[3:]):
            return True
    return False


def enumerate_files(
    root: Path,
    include: Iterable[str] = DEFAULT_INCLUDES,
    exclude: Iterable[str] = DEFAULT_EXCLUDES,
) -> List[Path]:
    """Return files under *root* selected by *include* minus *exclude*, sorted."""
    root = Path(root)
    include = tuple(include)
    exclude = tuple(exclude)
    if not include:
        return []

    selected: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        prefix = "" if rel_dir == "." else f"{rel_dir}/"
        dirnames[:] = sorted(
            d for d in dirnames if not _dir_excluded(prefix + d, exclude)
        )
        for name in filenames:
            rel = prefix + name
            if matches_any(rel, include) and not matches_any(rel, exclude):
                selected.append(Path(dirpath) / name)
    return sorted(selected)


def read_text(path: Path, max_bytes: Optional[int] = None) -> str:
    """Read *path* fully as UTF-8.

    Raises :class:`FileSkipped` for oversized or binary files, and lets
    ``OSError`` / ``UnicodeDecodeError`` propagate to the caller.
    """
    with open(path, "rb") as f:
        data = f.read() if max_bytes is None else f.read(max_bytes + 1)
    if max_bytes is not None and len(data) > max_bytes:
        raise FileSkipped(f"larger than {max_bytes} bytes")
    if b"\x00" in data:
        raise FileSkipped("binary content")
    return data.decode("utf-8")
