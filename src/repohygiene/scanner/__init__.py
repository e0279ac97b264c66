"""Scanner — entropy, suppression, content scanning, file-set auditing."""

from repohygiene.scanner.auditor import FileSetAuditor
from repohygiene.scanner.content import ContentScanner, line_and_column, scan_content
from repohygiene.scanner.entropy import find_high_entropy, is_high_entropy, shannon_entropy
from repohygiene.scanner.files import FileSkipped, enumerate_files, read_text
from repohygiene.scanner.suppression import FalsePositiveFilter

__all__ = [
    "ContentScanner",
    "FalsePositiveFilter",
    "FileSetAuditor",
    "FileSkipped",
    "enumerate_files",
    "find_high_entropy",
    "is_high_entropy",
    "line_and_column",
    "read_text",
    "scan_content",
    "shannon_entropy",
]
