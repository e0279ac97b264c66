"""Secret signatures — model, registry, built-in patterns."""

from repohygiene.patterns.models import MatchSpan, PatternError, SecretPattern, find_all_matches
from repohygiene.patterns.registry import PatternRegistry, build_registry

__all__ = [
    "MatchSpan",
    "PatternError",
    "PatternRegistry",
    "SecretPattern",
    "build_registry",
    "find_all_matches",
]
