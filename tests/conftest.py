"""Shared test fixtures — registries, sample content, temp source trees."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable, Dict, Union

import pytest

from repohygiene.patterns.registry import PatternRegistry, build_registry

# 32 distinct characters → Shannon entropy of exactly 5.0 bits/char.
RANDOM_32 = "aB3xY9mK2qW7rT5uI8oP4sD1fG6hJ0lZ"

AWS_KEY = "AKIAIOSFODNN7REAL123"


@pytest.fixture
def registry() -> PatternRegistry:
    return build_registry()


@pytest.fixture
def sample_clean() -> str:
    """Source with nothing secret-looking."""
    return textwrap.dedent("""\
        def greet(name):
            return f"Hello, {name}!"
    """)


@pytest.fixture
def sample_with_aws_key() -> str:
    """Config module leaking an AWS access key on line 3."""
    return textwrap.dedent(f"""\
        import os

        AWS_KEY = "{AWS_KEY}"
        DB_HOST = "localhost"
    """)


@pytest.fixture
def sample_with_high_entropy() -> str:
    """An unlabelled random literal that no signature knows about."""
    return f'config_value = "{RANDOM_32}"\n'


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[Dict[str, Union[str, bytes]]], Path]:
    """Create files under tmp_path from a {relative_path: content} mapping."""

    def _write(files: Dict[str, Union[str, bytes]]) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        return tmp_path

    return _write
