"""Configuration loading, schema, and defaults."""

from repohygiene.config.loader import ConfigError, load_config
from repohygiene.config.schema import (
    RepoHygieneConfig,
    ScanOptions,
    Severity,
    severity_at_or_above,
)

__all__ = [
    "ConfigError",
    "RepoHygieneConfig",
    "ScanOptions",
    "Severity",
    "load_config",
    "severity_at_or_above",
]
