"""Built-in secret signatures — aggregate all categories."""

from repohygiene.patterns.builtin.cloud import ALL_CLOUD_PATTERNS
from repohygiene.patterns.builtin.credentials import ALL_CREDENTIAL_PATTERNS
from repohygiene.patterns.builtin.keys import ALL_KEY_PATTERNS
from repohygiene.patterns.builtin.tokens import ALL_TOKEN_PATTERNS
from repohygiene.patterns.models import SecretPattern

ALL_BUILTIN_PATTERNS: tuple[SecretPattern, ...] = (
    *ALL_CLOUD_PATTERNS,
    *ALL_TOKEN_PATTERNS,
    *ALL_CREDENTIAL_PATTERNS,
    *ALL_KEY_PATTERNS,
)

__all__ = ["ALL_BUILTIN_PATTERNS"]
