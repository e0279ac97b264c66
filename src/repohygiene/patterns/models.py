"""Secret pattern model — regex compiled once, at construction."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, NamedTuple

from repohygiene.config.schema import SEVERITY_LEVELS, Severity


class PatternError(ValueError):
    """Raised when a pattern cannot be built (bad regex, bad severity, duplicate name)."""


class MatchSpan(NamedTuple):
    """One regex hit: absolute offsets into the scanned text plus the matched text."""

    start: int
    end: int
    text: str


@dataclass(frozen=True)
class SecretPattern:
    """A named secret signature.

    ``pattern`` is kept as the raw source string so the signature stays
    serialisable; ``compiled`` is built in ``__post_init__`` so a broken
    regex fails the process at startup rather than mid-scan.
    """

    name: str
    pattern: str
    severity: Severity
    description: str

    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise PatternError("Pattern name must not be empty")
        if self.severity not in SEVERITY_LEVELS:
            raise PatternError(
                f"Pattern {self.name!r} has invalid severity {self.severity!r}"
            )
        try:
            compiled = re.compile(self.pattern)
        except re.error as exc:
            raise PatternError(f"Pattern {self.name!r} does not compile: {exc}") from exc
        object.__setattr__(self, "compiled", compiled)


def find_all_matches(pattern: SecretPattern, text: str) -> List[MatchSpan]:
    """Return every non-overlapping match of *pattern* in *text*.

    Each call iterates afresh; nothing survives between calls.
    """
    return [
        MatchSpan(m.start(), m.end(), m.group(0))
        for m in pattern.compiled.finditer(text)
        if m.end() > m.start()
    ]
