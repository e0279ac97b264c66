"""Per-file content scanner — pattern matching plus entropy detection.

Pipeline for one file's text:
  1. every non-overlapping match of every registered pattern;
  2. absolute offset → 1-based (line, column);
  3. line-level false-positive suppression;
  4. entropy candidates, same mapping and suppression, dropped when a
     pattern finding on the same line already contains the value.

Nothing is cached between calls: each ``scan`` is a complete pass.
"""

from __future__ import annotations

import bisect
from typing import Dict, Iterable, List, Optional, Tuple

from repohygiene.findings.models import ENTROPY_FINDING_TYPE, Finding
from repohygiene.findings.redactor import mask
from repohygiene.patterns.models import SecretPattern, find_all_matches
from repohygiene.patterns.registry import PatternRegistry
from repohygiene.scanner.entropy import find_high_entropy
from repohygiene.scanner.suppression import FalsePositiveFilter

ENTROPY_SEVERITY = "medium"


class LineIndex:
    """Maps absolute offsets in *content* to 1-based line/column positions."""

    def __init__(self, content: str) -> None:
        self._content = content
        self._newlines: List[int] = [i for i, ch in enumerate(content) if ch == "\n"]

    def locate(self, offset: int) -> Tuple[int, int]:
        """Return (line, column) for *offset*, both 1-based."""
        preceding = bisect.bisect_left(self._newlines, offset)
        line_start = self._newlines[preceding - 1] + 1 if preceding else 0
        return preceding + 1, offset - line_start + 1

    def line_text(self, line: int) -> str:
        """Return the full text of 1-based *line*, without its newline."""
        start = self._newlines[line - 2] + 1 if line > 1 else 0
        end = self._newlines[line - 1] if line - 1 < len(self._newlines) else len(self._content)
        return self._content[start:end]


def line_and_column(content: str, offset: int) -> Tuple[int, int]:
    """Convert an absolute character offset to 1-based (line, column).

    One-off form of :meth:`LineIndex.locate`, which scanning uses so that a
    file's newlines are indexed once; the two must always agree.
    """
    line = content.count("\n", 0, offset) + 1
    column = offset - (content.rfind("\n", 0, offset) + 1) + 1
    return line, column


class ContentScanner:
    """Scan a single file's text against a registry and an entropy threshold."""

    def __init__(
        self,
        registry: PatternRegistry,
        entropy_threshold: float = 4.5,
        fp_filter: Optional[FalsePositiveFilter] = None,
    ) -> None:
        self.registry = registry
        self.entropy_threshold = entropy_threshold
        self.fp_filter = fp_filter or FalsePositiveFilter()

    def scan(self, content: str, file_path: str) -> List[Finding]:
        return scan_content(
            content,
            file_path,
            self.registry.all_patterns(),
            self.entropy_threshold,
            fp_filter=self.fp_filter,
        )


def scan_content(
    content: str,
    file_path: str,
    patterns: Iterable[SecretPattern],
    entropy_threshold: float = 4.5,
    *,
    fp_filter: Optional[FalsePositiveFilter] = None,
) -> List[Finding]:
    """Return pattern-origin findings followed by entropy-origin findings."""
    fp = fp_filter or FalsePositiveFilter()
    index = LineIndex(content)

    pattern_findings: List[Finding] = []
    by_line: Dict[int, List[str]] = {}

    # --- Pattern matches ---
    for pattern in patterns:
        for span in find_all_matches(pattern, content):
            line, column = index.locate(span.start)
            if fp.is_likely_false_positive(index.line_text(line), span.text):
                continue
            pattern_findings.append(
                Finding(
                    type=pattern.name,
                    file=file_path,
                    line=line,
                    column=column,
                    raw_match=span.text,
                    masked_match=mask(span.text),
                    severity=pattern.severity,
                )
            )
            by_line.setdefault(line, []).append(span.text)

    # --- Entropy candidates ---
    entropy_findings: List[Finding] = []
    for candidate in find_high_entropy(content, entropy_threshold):
        line, column = index.locate(candidate.position)
        if fp.is_likely_false_positive(index.line_text(line), candidate.value):
            continue
        # Pattern matches take precedence on the same line.
        if any(candidate.value in raw for raw in by_line.get(line, ())):
            continue
        entropy_findings.append(
            Finding(
                type=ENTROPY_FINDING_TYPE,
                file=file_path,
                line=line,
                column=column,
                raw_match=candidate.value,
                masked_match=mask(candidate.value),
                severity=ENTROPY_SEVERITY,
                entropy=candidate.entropy,
            )
        )

    return pattern_findings + entropy_findings
