"""JSON reporter for CI pipelines."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Dict, List, Optional, Sequence

from repohygiene import __version__
from repohygiene.findings.models import Issue, ScanSummary


def to_dict(
    summary: ScanSummary,
    issues: Optional[Sequence[Issue]] = None,
) -> Dict[str, Any]:
    """Convert a ScanSummary to a JSON-serialisable dict (masked values only)."""
    findings_list: List[Dict[str, Any]] = []
    for f in summary.findings:
        findings_list.append({
            "type": f.type,
            "severity": f.severity,
            "file": f.file,
            "line": f.line,
            "column": f.column,
            "match": f.masked_match,
            **({"entropy": round(f.entropy, 2)} if f.entropy is not None else {}),
        })

    data: Dict[str, Any] = {
        "version": __version__,
        "scanned_files": summary.scanned_file_count,
        "total_findings": summary.total_findings,
        "findings": findings_list,
        "skipped_files": summary.skipped_files,
        "scan_duration_ms": summary.duration_ms,
    }
    if issues is not None:
        data["issues"] = [
            {k: v for k, v in dataclasses.asdict(i).items() if v is not None}
            for i in issues
        ]
    return data


def render(summary: ScanSummary, issues: Optional[Sequence[Issue]] = None) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(summary, issues), indent=2)
