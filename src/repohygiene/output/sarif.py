"""SARIF v2.1.0 reporter — GitHub Advanced Security / Code Scanning.

Only masked values ever appear in SARIF output.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List

from repohygiene import __version__
from repohygiene.findings.aggregator import issue_severity
from repohygiene.findings.models import Finding, ScanSummary

_SARIF_SCHEMA = (
    "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/main/"
    "sarif-2.1/schema/sarif-schema-2.1.0.json"
)

_LEVEL_MAP = {
    "error": "error",
    "warning": "warning",
    "info": "note",
}

_SECURITY_SEVERITY = {
    "high": "7.5",
    "medium": "5.0",
    "low": "2.0",
}


def rule_id(finding_type: str) -> str:
    """Turn a finding type into a stable SARIF rule id: 'AWS Access Key ID' → 'aws-access-key-id'."""
    return re.sub(r"[^a-z0-9]+", "-", finding_type.lower()).strip("-")


def _level(finding: Finding) -> str:
    return _LEVEL_MAP[issue_severity(finding)]


def to_dict(summary: ScanSummary) -> Dict[str, Any]:
    """Convert a ScanSummary to a SARIF v2.1.0 dict."""
    rules: List[Dict[str, Any]] = []
    seen_rules: set[str] = set()
    results: List[Dict[str, Any]] = []

    for f in summary.findings:
        rid = rule_id(f.type)
        if rid not in seen_rules:
            seen_rules.add(rid)
            rules.append({
                "id": rid,
                "name": f.type,
                "shortDescription": {"text": f.type},
                "defaultConfiguration": {"level": _level(f)},
                "properties": {
                    "security-severity": _SECURITY_SEVERITY.get(f.severity, "5.0"),
                },
            })

        results.append({
            "ruleId": rid,
            "level": _level(f),
            "message": {"text": f"{f.type}: {f.masked_match}"},
            "locations": [
                {
                    "physicalLocation": {
                        "artifactLocation": {"uri": f.file},
                        "region": {
                            "startLine": f.line,
                            "startColumn": f.column,
                            "snippet": {"text": f.masked_match},
                        },
                    }
                }
            ],
        })

    return {
        "$schema": _SARIF_SCHEMA,
        "version": "2.1.0",
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "repohygiene",
                        "version": __version__,
                        "rules": rules,
                    }
                },
                "results": results,
            }
        ],
    }


def render(summary: ScanSummary) -> str:
    """Return SARIF JSON string."""
    return json.dumps(to_dict(summary), indent=2)
