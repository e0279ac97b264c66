"""Finding, summary and issue data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

ENTROPY_FINDING_TYPE = "High Entropy String"


@dataclass(frozen=True)
class Finding:
    """A single detection in one file.

    ``raw_match`` holds the real secret and lives in memory only: it is kept
    out of ``repr`` and no reporter reads it. Reports use ``masked_match``.
    """

    type: str
    file: str
    line: int
    column: int
    raw_match: str = field(repr=False)
    masked_match: str
    severity: str = "medium"
    entropy: Optional[float] = None

    @property
    def is_entropy(self) -> bool:
        return self.entropy is not None

    @property
    def sort_key(self) -> tuple[str, int, int]:
        return (self.file, self.line, self.column)


@dataclass
class ScanSummary:
    """Complete result of one scan run."""

    findings: List[Finding] = field(default_factory=list)
    scanned_file_count: int = 0
    skipped_files: List[str] = field(default_factory=list)
    duration_ms: float = 0.0

    @property
    def total_findings(self) -> int:
        return len(self.findings)

    @property
    def pattern_findings(self) -> List[Finding]:
        return [f for f in self.findings if not f.is_entropy]

    @property
    def entropy_findings(self) -> List[Finding]:
        return [f for f in self.findings if f.is_entropy]


@dataclass(frozen=True)
class Issue:
    """Result record shared by every scanner in the toolkit."""

    id: str
    severity: str  # 'error' | 'warning' | 'info'
    message: str
    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    rule: Optional[str] = None
    suggestion: Optional[str] = None


@dataclass
class AuditResult:
    """Issues plus the underlying summary for one module run."""

    module: str
    status: str  # 'passed' | 'warning' | 'failed'
    issues: List[Issue] = field(default_factory=list)
    summary: ScanSummary = field(default_factory=ScanSummary)
