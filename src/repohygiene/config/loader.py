"""Read .repohygiene.toml, validate it, then layer REPOHYGIENE_* env vars on top."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from repohygiene.config.schema import (
    FAIL_ON_LEVELS,
    OUTPUT_FORMATS,
    OutputConfig,
    RepoHygieneConfig,
    SecretsConfig,
)

CONFIG_FILENAME = ".repohygiene.toml"
ENV_PREFIX = "REPOHYGIENE_"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Return the config path to use, or None when the scan root has none.

    An explicit *override* must exist.
    """
    if override:
        explicit = Path(override)
        if not explicit.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return explicit
    default = root / CONFIG_FILENAME
    return default if default.is_file() else None


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _section(raw: Dict[str, Any], name: str, cls: type) -> Any:
    """Instantiate *cls* from table ``[name]``; keys the dataclass lacks are dropped."""
    table = raw.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{name}] must be a table")
    known = {f.name for f in dataclasses.fields(cls)}
    return cls(**{k: v for k, v in table.items() if k in known})


def _validate(cfg: RepoHygieneConfig) -> None:
    secrets = cfg.secrets
    if isinstance(secrets.entropy_threshold, bool) or not isinstance(
        secrets.entropy_threshold, (int, float)
    ):
        raise ConfigError("secrets.entropy_threshold must be a number")
    workers = secrets.max_workers
    if workers is not None and (
        isinstance(workers, bool) or not isinstance(workers, int) or workers < 1
    ):
        raise ConfigError("secrets.max_workers must be a positive integer")
    size = secrets.max_file_size_kb
    if size is not None and (isinstance(size, bool) or not isinstance(size, int) or size < 1):
        raise ConfigError("secrets.max_file_size_kb must be a positive integer")
    if not isinstance(secrets.patterns_dir, str):
        raise ConfigError("secrets.patterns_dir must be a string")
    for key in ("include", "exclude", "suppression_keywords"):
        value = getattr(secrets, key)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"secrets.{key} must be a list of strings")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"output.format must be one of {', '.join(OUTPUT_FORMATS)}")
    if cfg.output.fail_on not in FAIL_ON_LEVELS:
        raise ConfigError(f"output.fail_on must be one of {', '.join(FAIL_ON_LEVELS)}")


def _split_paths(value: str) -> List[str]:
    sep = ";" if os.name == "nt" else ":"
    return [p.strip() for p in value.split(sep) if p.strip()]


def _set_threshold(cfg: RepoHygieneConfig, value: str) -> None:
    try:
        cfg.secrets.entropy_threshold = float(value)
    except ValueError:
        pass


def _set_format(cfg: RepoHygieneConfig, value: str) -> None:
    if value in OUTPUT_FORMATS:
        cfg.output.format = value  # type: ignore[assignment]


def _set_fail_on(cfg: RepoHygieneConfig, value: str) -> None:
    if value in FAIL_ON_LEVELS:
        cfg.output.fail_on = value  # type: ignore[assignment]


def _add_excludes(cfg: RepoHygieneConfig, value: str) -> None:
    cfg.secrets.exclude.extend(_split_paths(value))


# Unparseable values are ignored; the file or default setting stays in force.
_ENV_OVERRIDES: Tuple[Tuple[str, Callable[[RepoHygieneConfig, str], None]], ...] = (
    ("ENTROPY_THRESHOLD", _set_threshold),
    ("FORMAT", _set_format),
    ("FAIL_ON", _set_fail_on),
    ("EXCLUDE", _add_excludes),
)


def _apply_env(cfg: RepoHygieneConfig) -> None:
    for suffix, apply in _ENV_OVERRIDES:
        value = os.environ.get(ENV_PREFIX + suffix)
        if value:
            apply(cfg, value)


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> RepoHygieneConfig:
    """Load, validate, and return a RepoHygieneConfig."""
    path = find_config_file(root, config_override)
    if path is None:
        cfg = RepoHygieneConfig()
    else:
        raw = _read_toml(path)
        cfg = RepoHygieneConfig(
            version=str(raw.get("version", "1.0")),
            secrets=_section(raw, "secrets", SecretsConfig),
            output=_section(raw, "output", OutputConfig),
        )
        _validate(cfg)

    _apply_env(cfg)
    return cfg
