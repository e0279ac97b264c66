"""Shannon entropy calculator and high-entropy candidate extraction."""

from __future__ import annotations

import math
import re
from collections import Counter
from typing import List, NamedTuple, Set, Tuple

MIN_LENGTH = 20
MAX_LENGTH = 200
MIN_UNIQUE_RATIO = 0.3

_BASE64_LIKE_RE = re.compile(r"[A-Za-z0-9+/=_-]+")
_HEX_RE = re.compile(r"[0-9a-fA-F]+")

# Quoted literals and unquoted assignment right-hand sides.
_QUOTED_RE = re.compile(r"""['"]([A-Za-z0-9+/=_-]{20,})['"]""")
_ASSIGNMENT_RE = re.compile(r"[=:]\s*([A-Za-z0-9+/=_-]{20,})(?=\s|;|$)")

_EXTRACTORS = (_QUOTED_RE, _ASSIGNMENT_RE)


class EntropyCandidate(NamedTuple):
    value: str
    entropy: float
    position: int  # absolute offset of value in the scanned content


def shannon_entropy(s: str) -> float:
    """Compute Shannon entropy (bits per character) of string *s*.

    H = -Σ p(c) · log₂(p(c))  over unique characters c.
    """
    if not s:
        return 0.0
    counts = Counter(s)
    total = len(s)
    # Sort so the float sum does not depend on character order.
    return -sum((c / total) * math.log2(c / total) for c in sorted(counts.values()))


def is_high_entropy(s: str, threshold: float = 4.5) -> bool:
    """Return True if *s* looks like a generated secret.

    Rejects strings outside [MIN_LENGTH, MAX_LENGTH], strings with too little
    character variety, and strings that are neither base64-like nor hex.
    """
    if len(s) < MIN_LENGTH or len(s) > MAX_LENGTH:
        return False
    if len(set(s)) < len(s) * MIN_UNIQUE_RATIO:
        return False
    if not (_BASE64_LIKE_RE.fullmatch(s) or _HEX_RE.fullmatch(s)):
        return False
    return shannon_entropy(s) >= threshold


def find_high_entropy(content: str, threshold: float = 4.5) -> List[EntropyCandidate]:
    """Return high-entropy candidates found anywhere in *content*.

    A value picked up by both extractors at the same offset is reported once.
    """
    results: List[EntropyCandidate] = []
    seen: Set[Tuple[int, str]] = set()
    for extractor in _EXTRACTORS:
        for m in extractor.finditer(content):
            value = m.group(1)
            key = (m.start(1), value)
            if key in seen or not is_high_entropy(value, threshold):
                continue
            seen.add(key)
            results.append(EntropyCandidate(value, shannon_entropy(value), m.start(1)))
    return results
