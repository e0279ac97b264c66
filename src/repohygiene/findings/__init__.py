"""Finding models, aggregation, and masking."""

from repohygiene.findings.aggregator import merge_partials, sort_findings, to_issues
from repohygiene.findings.models import AuditResult, Finding, Issue, ScanSummary
from repohygiene.findings.redactor import mask

__all__ = [
    "AuditResult",
    "Finding",
    "Issue",
    "ScanSummary",
    "mask",
    "merge_partials",
    "sort_findings",
    "to_issues",
]
