"""Tests for output reporters and the masker."""

import io
import json

from rich.console import Console

from repohygiene.findings.aggregator import to_issues
from repohygiene.findings.models import ENTROPY_FINDING_TYPE, Finding, ScanSummary
from repohygiene.findings.redactor import MAX_MASK_RUN, mask
from repohygiene.output import json_report, sarif, terminal

RAW_KEY = "AKIAIOSFODNN7REAL123"
RAW_BLOB = "aB3xY9mK2qW7rT5uI8oP4sD1fG6hJ0lZ"


def _make_summary(findings=None) -> ScanSummary:
    """Build a ScanSummary with sample data."""
    if findings is None:
        findings = [
            Finding(
                type="AWS Access Key ID",
                file="config/deploy.py",
                line=42,
                column=7,
                raw_match=RAW_KEY,
                masked_match=mask(RAW_KEY),
                severity="high",
            ),
            Finding(
                type=ENTROPY_FINDING_TYPE,
                file="config/deploy.py",
                line=50,
                column=12,
                raw_match=RAW_BLOB,
                masked_match=mask(RAW_BLOB),
                severity="medium",
                entropy=5.0,
            ),
        ]
    return ScanSummary(findings=findings, scanned_file_count=5, duration_ms=15.3)


class TestMask:
    def test_short_fully_masked(self):
        assert mask("abc") == "***"
        assert mask("abcdefgh") == "********"
        assert mask("") == ""

    def test_partial_reveal(self):
        masked = mask("abcdefghijklmnop")
        assert masked.startswith("abcd")
        assert masked.endswith("mnop")
        assert "*" in masked
        assert masked == "abcd********mnop"

    def test_mask_run_capped(self):
        masked = mask("x" * 4 + "y" * 100 + "z" * 4)
        assert masked == "xxxx" + "*" * MAX_MASK_RUN + "zzzz"

    def test_custom_visible_chars(self):
        assert mask("abcdefghij", visible_chars=2) == "ab******ij"

    def test_never_reveals_middle(self):
        assert "IOSFODNN7RE" not in mask(RAW_KEY)


class TestFindingRepr:
    def test_raw_match_not_in_repr(self):
        summary = _make_summary()
        assert RAW_KEY not in repr(summary.findings[0])


class TestJsonReport:
    def test_valid_json(self):
        data = json.loads(json_report.render(_make_summary()))
        assert data["scanned_files"] == 5
        assert data["total_findings"] == 2
        assert data["findings"][0]["match"] == "AKIA**********L123"
        assert data["findings"][1]["entropy"] == 5.0
        assert "entropy" not in data["findings"][0]

    def test_never_contains_raw(self):
        summary = _make_summary()
        output = json_report.render(summary, to_issues(summary))
        assert RAW_KEY not in output
        assert RAW_BLOB not in output

    def test_issues_included(self):
        summary = _make_summary()
        data = json.loads(json_report.render(summary, to_issues(summary)))
        assert [i["id"] for i in data["issues"]] == ["secrets-1", "secrets-2", "secrets-3"]
        # summary issue carries no location
        assert "file" not in data["issues"][-1]

    def test_empty_result(self):
        data = json.loads(json_report.render(ScanSummary()))
        assert data["total_findings"] == 0
        assert data["findings"] == []
        assert "issues" not in data


class TestSarifReport:
    def test_valid_sarif(self):
        data = json.loads(sarif.render(_make_summary()))
        assert data["version"] == "2.1.0"
        run = data["runs"][0]
        assert run["tool"]["driver"]["name"] == "repohygiene"
        assert len(run["results"]) == 2

    def test_levels_follow_issue_severity(self):
        results = sarif.to_dict(_make_summary())["runs"][0]["results"]
        assert [r["level"] for r in results] == ["error", "warning"]

    def test_low_pattern_is_note(self):
        finding = Finding(
            type="Stripe Test Key", file="a.py", line=1, column=1,
            raw_match="sk_test_" + "a1" * 12, masked_match="sk_t**********a1a1", severity="low",
        )
        results = sarif.to_dict(_make_summary([finding]))["runs"][0]["results"]
        assert results[0]["level"] == "note"

    def test_location(self):
        results = sarif.to_dict(_make_summary())["runs"][0]["results"]
        region = results[0]["locations"][0]["physicalLocation"]["region"]
        assert region["startLine"] == 42
        assert region["startColumn"] == 7
        assert region["snippet"]["text"] == "AKIA**********L123"

    def test_rule_ids(self):
        assert sarif.rule_id("AWS Access Key ID") == "aws-access-key-id"
        rules = sarif.to_dict(_make_summary())["runs"][0]["tool"]["driver"]["rules"]
        assert [r["id"] for r in rules] == ["aws-access-key-id", "high-entropy-string"]

    def test_never_contains_raw(self):
        output = sarif.render(_make_summary())
        assert RAW_KEY not in output
        assert RAW_BLOB not in output


class TestTerminalReport:
    def _render(self, summary, **kwargs) -> str:
        buf = io.StringIO()
        terminal.render(summary, console=Console(file=buf, width=200), **kwargs)
        return buf.getvalue()

    def test_clean(self):
        out = self._render(ScanSummary(scanned_file_count=3))
        assert "No secrets detected" in out

    def test_findings_masked(self):
        out = self._render(_make_summary(), blocked=True)
        assert "AKIA**********L123" in out
        assert "config/deploy.py:42:7" in out
        assert RAW_KEY not in out
        assert "FAILED" in out

    def test_below_threshold(self):
        out = self._render(_make_summary(), blocked=False)
        assert "below fail threshold" in out

    def test_summary_splits_by_origin(self):
        summary = _make_summary()
        assert [f.type for f in summary.pattern_findings] == ["AWS Access Key ID"]
        assert [f.type for f in summary.entropy_findings] == [ENTROPY_FINDING_TYPE]
        out = self._render(summary, blocked=True)
        assert "Pattern matches: 1" in out
        assert "Entropy-only:   1" in out
