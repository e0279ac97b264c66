"""Secret value masking for safe output."""

from __future__ import annotations

MAX_MASK_RUN = 10


def mask(secret: str, visible_chars: int = 4) -> str:
    """Partially reveal *secret*: first and last *visible_chars* characters.

    Short secrets (``len <= 2 * visible_chars``) become all asterisks of the
    same length. The masked run is capped at ``MAX_MASK_RUN`` asterisks.

    Example: ``sk_live_abcdefghijklmnop1234`` → ``sk_l**********1234``
    """
    if len(secret) <= visible_chars * 2:
        return "*" * len(secret)
    start = secret[:visible_chars]
    end = secret[len(secret) - visible_chars:]
    hidden = "*" * min(len(secret) - visible_chars * 2, MAX_MASK_RUN)
    return f"{start}{hidden}{end}"
