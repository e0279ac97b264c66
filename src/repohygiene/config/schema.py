"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, List, Optional, Sequence, Tuple

from repohygiene.config.defaults import (
    DEFAULT_EXCLUDES,
    DEFAULT_INCLUDES,
    DEFAULT_SUPPRESSION_KEYWORDS,
)

if TYPE_CHECKING:
    from repohygiene.patterns.models import SecretPattern

Severity = Literal["low", "medium", "high"]
IssueSeverity = Literal["error", "warning", "info"]
FailOn = Literal["low", "medium", "high", "never"]

SEVERITY_LEVELS: Tuple[str, ...] = ("high", "medium", "low")
FAIL_ON_LEVELS: Tuple[str, ...] = ("low", "medium", "high", "never")
OUTPUT_FORMATS: Tuple[str, ...] = ("terminal", "json", "sarif")

SEVERITY_ORDER: dict[str, int] = {
    "low": 0,
    "medium": 1,
    "high": 2,
}


def severity_at_or_above(finding_sev: str, threshold: str) -> bool:
    """Return True if *finding_sev* is at or above *threshold*.

    ``never`` as a threshold never matches.
    """
    if threshold == "never":
        return False
    return SEVERITY_ORDER.get(finding_sev, 0) >= SEVERITY_ORDER.get(threshold, 0)


def _default_workers() -> int:
    return os.cpu_count() or 4


@dataclass(frozen=True)
class ScanOptions:
    """Per-run engine options. The engine reads nothing else."""

    entropy_threshold: float = 4.5
    include_globs: Tuple[str, ...] = DEFAULT_INCLUDES
    exclude_globs: Tuple[str, ...] = DEFAULT_EXCLUDES
    extra_patterns: Tuple[SecretPattern, ...] = ()
    suppression_keywords: Tuple[str, ...] = DEFAULT_SUPPRESSION_KEYWORDS
    max_workers: int = field(default_factory=_default_workers)
    max_file_size_kb: Optional[int] = 1024


@dataclass
class SecretsConfig:
    entropy_threshold: float = 4.5
    include: List[str] = field(default_factory=list)  # empty = defaults
    exclude: List[str] = field(default_factory=list)  # appended to defaults
    suppression_keywords: List[str] = field(default_factory=list)  # empty = defaults
    max_workers: Optional[int] = None
    max_file_size_kb: Optional[int] = 1024
    patterns_dir: str = ".repohygiene-patterns"

    def to_scan_options(self, extra_patterns: Sequence[SecretPattern] = ()) -> ScanOptions:
        """Resolve this section against the built-in defaults."""
        return ScanOptions(
            entropy_threshold=self.entropy_threshold,
            include_globs=tuple(self.include) if self.include else DEFAULT_INCLUDES,
            exclude_globs=DEFAULT_EXCLUDES + tuple(self.exclude),
            extra_patterns=tuple(extra_patterns),
            suppression_keywords=(
                tuple(self.suppression_keywords)
                if self.suppression_keywords
                else DEFAULT_SUPPRESSION_KEYWORDS
            ),
            max_workers=self.max_workers or _default_workers(),
            max_file_size_kb=self.max_file_size_kb,
        )


@dataclass
class OutputConfig:
    format: Literal["terminal", "json", "sarif"] = "terminal"
    fail_on: FailOn = "high"  # fail on findings at or above this level


@dataclass
class RepoHygieneConfig:
    version: str = "1.0"
    secrets: SecretsConfig = field(default_factory=SecretsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
