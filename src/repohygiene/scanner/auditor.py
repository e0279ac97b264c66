"""File-set auditor — drives the content scanner across a tree of files.

Files are split into one batch per worker. Each worker fills its own
PartialResult; the partials are merged once all workers finish, so no
shared structure is written concurrently. Unreadable files are skipped and
logged at DEBUG; they never abort the scan.
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from repohygiene.config.schema import ScanOptions
from repohygiene.findings.aggregator import (
    PartialResult,
    determine_status,
    merge_partials,
    to_issues,
)
from repohygiene.findings.models import AuditResult, ScanSummary
from repohygiene.patterns.registry import PatternRegistry, build_registry
from repohygiene.scanner.content import ContentScanner
from repohygiene.scanner.files import FileSkipped, enumerate_files, read_text
from repohygiene.scanner.suppression import FalsePositiveFilter

logger = logging.getLogger(__name__)

Enumerator = Callable[[Path, Iterable[str], Iterable[str]], List[Path]]


class FileSetAuditor:
    """Scan every file selected under *root* and report findings as issues."""

    module = "secrets"

    def __init__(
        self,
        root: Path,
        options: Optional[ScanOptions] = None,
        registry: Optional[PatternRegistry] = None,
        enumerator: Enumerator = enumerate_files,
    ) -> None:
        self.root = Path(root)
        self.options = options or ScanOptions()
        if registry is None:
            registry = build_registry(self.options.extra_patterns)
        elif self.options.extra_patterns:
            registry = registry.with_patterns(self.options.extra_patterns)
        self.registry = registry
        self.enumerator = enumerator
        self.scanner = ContentScanner(
            self.registry,
            entropy_threshold=self.options.entropy_threshold,
            fp_filter=FalsePositiveFilter(self.options.suppression_keywords),
        )

    # ---- public API ----

    def run(self, cancel: Optional[threading.Event] = None) -> ScanSummary:
        """Enumerate files under root and scan them."""
        paths = self.enumerator(
            self.root, self.options.include_globs, self.options.exclude_globs
        )
        logger.info("Scanning %d files under %s", len(paths), self.root)
        return self.scan_files(paths, cancel=cancel)

    def audit(self, cancel: Optional[threading.Event] = None) -> AuditResult:
        """Scan and map the findings into toolkit issues."""
        summary = self.run(cancel=cancel)
        issues = to_issues(summary, module=self.module)
        logger.info(
            "Scanned %d files, found %d potential secrets",
            summary.scanned_file_count,
            summary.total_findings,
        )
        return AuditResult(
            module=self.module,
            status=determine_status(issues),
            issues=issues,
            summary=summary,
        )

    def scan_files(
        self,
        paths: Sequence[Path],
        cancel: Optional[threading.Event] = None,
    ) -> ScanSummary:
        """Scan *paths* with a bounded worker pool and return a sorted summary."""
        start = time.perf_counter()
        workers = max(1, min(self.options.max_workers, len(paths)))
        batches = [list(paths[i::workers]) for i in range(workers)]

        if workers == 1:
            partials = [self._scan_batch(batches[0], cancel)]
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [
                    executor.submit(self._scan_batch, batch, cancel) for batch in batches
                ]
                partials = [f.result() for f in futures]

        summary = merge_partials(partials)
        summary.duration_ms = round((time.perf_counter() - start) * 1000, 2)
        return summary

    # ---- internals ----

    def _display_path(self, path: Path) -> str:
        try:
            return Path(path).relative_to(self.root).as_posix()
        except ValueError:
            return str(path)

    def _scan_batch(
        self, batch: Sequence[Path], cancel: Optional[threading.Event]
    ) -> PartialResult:
        partial = PartialResult()
        max_bytes = (
            self.options.max_file_size_kb * 1024
            if self.options.max_file_size_kb
            else None
        )
        for path in batch:
            # Cancellation is honoured between files only.
            if cancel is not None and cancel.is_set():
                break
            display = self._display_path(path)
            try:
                content = read_text(Path(path), max_bytes=max_bytes)
            except UnicodeDecodeError:
                # The exception text quotes raw bytes; keep them out of logs.
                logger.debug("Skipping %s: not valid UTF-8", display)
                partial.skipped.append(display)
                continue
            except (OSError, FileSkipped) as exc:
                logger.debug("Skipping %s: %s", display, exc)
                partial.skipped.append(display)
                continue
            partial.findings.extend(self.scanner.scan(content, display))
            partial.scanned += 1
        return partial
