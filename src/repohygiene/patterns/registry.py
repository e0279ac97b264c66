"""Pattern registry — an immutable, ordered table of secret signatures."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

import yaml

from repohygiene.config.schema import SEVERITY_LEVELS
from repohygiene.patterns.models import PatternError, SecretPattern

logger = logging.getLogger(__name__)


class PatternRegistry:
    """Ordered, read-only collection of :class:`SecretPattern`.

    Built once at startup and handed to the scanner. Registration order
    decides which signature reports a byte range first when two overlap;
    overlapping hits from different patterns are all kept.
    """

    __slots__ = ("_patterns",)

    def __init__(self, patterns: Iterable[SecretPattern] = ()) -> None:
        ordered = tuple(patterns)
        seen: set[str] = set()
        for p in ordered:
            if p.name in seen:
                raise PatternError(f"Duplicate pattern name: {p.name!r}")
            seen.add(p.name)
        self._patterns: Tuple[SecretPattern, ...] = ordered

    # ---- queries ----

    def all_patterns(self) -> Tuple[SecretPattern, ...]:
        return self._patterns

    def by_severity(self, level: str) -> Tuple[SecretPattern, ...]:
        if level not in SEVERITY_LEVELS:
            raise ValueError(f"Unknown severity level: {level!r}")
        return tuple(p for p in self._patterns if p.severity == level)

    def get(self, name: str) -> Optional[SecretPattern]:
        for p in self._patterns:
            if p.name == name:
                return p
        return None

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[SecretPattern]:
        return iter(self._patterns)

    def __repr__(self) -> str:
        return f"PatternRegistry({len(self._patterns)} patterns)"

    # ---- derivation ----

    def with_patterns(self, extra: Iterable[SecretPattern]) -> PatternRegistry:
        """Return a new registry with *extra* appended; this one is unchanged."""
        return PatternRegistry((*self._patterns, *extra))


# ---- custom pattern loading ----


def load_custom_patterns(directory: Path) -> List[SecretPattern]:
    """Load YAML pattern files from *directory*, sorted by filename.

    Each file holds one mapping or a list of mappings with ``name``,
    ``pattern``, ``severity`` and ``description`` keys. A bad regex raises
    :class:`PatternError`.
    """
    if not directory.is_dir():
        return []
    loaded: List[SecretPattern] = []
    for path in sorted(directory.iterdir()):
        if path.suffix not in (".yaml", ".yml"):
            continue
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            continue
        if not isinstance(data, list):
            data = [data]
        for entry in data:
            if not isinstance(entry, dict) or "name" not in entry or "pattern" not in entry:
                raise PatternError(f"{path}: each pattern needs 'name' and 'pattern'")
            loaded.append(
                SecretPattern(
                    name=entry["name"],
                    pattern=entry["pattern"],
                    severity=entry.get("severity", "medium"),
                    description=entry.get("description", ""),
                )
            )
        logger.debug("Loaded custom patterns from %s", path)
    return loaded


def build_registry(
    extra_patterns: Iterable[SecretPattern] = (),
    custom_dir: Optional[Path] = None,
) -> PatternRegistry:
    """Create the default registry plus any extra and custom patterns."""
    from repohygiene.patterns.builtin import ALL_BUILTIN_PATTERNS

    extras = list(extra_patterns)
    if custom_dir is not None:
        extras.extend(load_custom_patterns(custom_dir))

    registry = PatternRegistry(ALL_BUILTIN_PATTERNS)
    if extras:
        registry = registry.with_patterns(extras)
    logger.debug("Pattern registry ready: %d patterns", len(registry))
    return registry
