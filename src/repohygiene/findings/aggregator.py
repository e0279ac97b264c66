"""Finding aggregation, ordering, and mapping to toolkit issues."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from repohygiene.findings.models import Finding, Issue, ScanSummary

SECRET_RULE = "no-secrets"
SUMMARY_RULE = "secrets-summary"
SECRET_SUGGESTION = "Remove this secret and rotate it immediately"
SUMMARY_SUGGESTION = "Review findings and rotate any exposed credentials"

# Pattern severity → issue severity. Entropy-origin findings are always warnings.
_ISSUE_SEVERITY = {
    "high": "error",
    "medium": "warning",
    "low": "info",
}


@dataclass
class PartialResult:
    """One worker's local accumulator."""

    findings: List[Finding] = field(default_factory=list)
    scanned: int = 0
    skipped: List[str] = field(default_factory=list)


def sort_findings(findings: Iterable[Finding]) -> List[Finding]:
    """Order findings by (file, line, column) for deterministic output."""
    return sorted(findings, key=lambda f: f.sort_key)


def merge_partials(partials: Iterable[PartialResult]) -> ScanSummary:
    """Reduce per-worker accumulators into a single sorted ScanSummary."""
    findings: List[Finding] = []
    skipped: List[str] = []
    scanned = 0
    for part in partials:
        findings.extend(part.findings)
        skipped.extend(part.skipped)
        scanned += part.scanned
    return ScanSummary(
        findings=sort_findings(findings),
        scanned_file_count=scanned,
        skipped_files=sorted(skipped),
    )


def issue_severity(finding: Finding) -> str:
    if finding.is_entropy:
        return "warning"
    return _ISSUE_SEVERITY.get(finding.severity, "warning")


def to_issues(summary: ScanSummary, module: str = "secrets") -> List[Issue]:
    """Map findings to issues, plus one summary issue when anything was found."""
    issues: List[Issue] = []
    for finding in summary.findings:
        issues.append(
            Issue(
                id=f"{module}-{len(issues) + 1}",
                severity=issue_severity(finding),
                message=f"{finding.type}: {finding.masked_match}",
                file=finding.file,
                line=finding.line,
                column=finding.column,
                rule=SECRET_RULE,
                suggestion=SECRET_SUGGESTION,
            )
        )

    if summary.findings:
        issues.append(
            Issue(
                id=f"{module}-{len(issues) + 1}",
                severity="error",
                message=(
                    f"Found {summary.total_findings} potential secrets in "
                    f"{summary.scanned_file_count} files"
                ),
                rule=SUMMARY_RULE,
                suggestion=SUMMARY_SUGGESTION,
            )
        )
    return issues


def determine_status(issues: Iterable[Issue]) -> str:
    """'failed' on any error, 'warning' on any warning, else 'passed'."""
    severities = {i.severity for i in issues}
    if "error" in severities:
        return "failed"
    if "warning" in severities:
        return "warning"
    return "passed"
