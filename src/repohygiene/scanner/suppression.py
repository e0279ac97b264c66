"""Line-level false-positive suppression.

A match is dropped when any of these hold for its full source line:
  - the line is a standalone ``//`` or ``#`` comment that mentions neither
    ``key`` nor ``secret``;
  - the line contains one of the suppression keywords (``example``,
    ``test``, ``placeholder``, ...), case-insensitive;
  - the matched text has fewer than 3 distinct characters.

The keyword check is deliberately coarse: a real secret on a line that also
mentions ``test`` is dropped too. Tune it through ``suppression_keywords``.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from repohygiene.config.defaults import DEFAULT_SUPPRESSION_KEYWORDS

COMMENT_MARKERS: Tuple[str, ...] = ("//", "#")
COMMENT_KEEP_WORDS: Tuple[str, ...] = ("key", "secret")
MIN_DISTINCT_CHARS = 3


def is_pure_comment(line_content: str) -> bool:
    """Return True if the line is a standalone comment (shell/Python/JS style)."""
    return line_content.strip().startswith(COMMENT_MARKERS)


class FalsePositiveFilter:
    """Decide whether a match on a given line is likely noise."""

    def __init__(self, keywords: Iterable[str] = DEFAULT_SUPPRESSION_KEYWORDS) -> None:
        self.keywords: Tuple[str, ...] = tuple(k.lower() for k in keywords if k)

    def is_comment_noise(self, line_content: str) -> bool:
        if not is_pure_comment(line_content):
            return False
        lower = line_content.lower()
        return not any(word in lower for word in COMMENT_KEEP_WORDS)

    def has_keyword(self, line_content: str) -> bool:
        lower = line_content.lower()
        return any(k in lower for k in self.keywords)

    def is_likely_false_positive(self, line_content: str, matched: str) -> bool:
        if self.is_comment_noise(line_content):
            return True
        if self.has_keyword(line_content):
            return True
        return len(set(matched)) < MIN_DISTINCT_CHARS
