"""Tests for file enumeration and reading."""

import os
from pathlib import Path

import pytest

from repohygiene.config.defaults import DEFAULT_EXCLUDES, DEFAULT_INCLUDES
from repohygiene.scanner import files
from repohygiene.scanner.files import (
    FileSkipped,
    _dir_excluded,
    enumerate_files,
    matches_glob,
    read_text,
)


class TestMatchesGlob:
    @pytest.mark.parametrize("path,pattern,expected", [
        ("app.py", "**/*.py", True),
        ("src/pkg/app.py", "**/*.py", True),
        ("src/app.js", "**/*.py", False),
        (".env", "**/*.env*", True),
        ("deploy/.env.production", "**/*.env*", True),
        ("webpack.config.js", "**/*.config.*", True),
        ("node_modules/lib/index.js", "node_modules/**", True),
        ("src/node_modules.py", "node_modules/**", False),
        ("static/app.min.js", "*.min.js", True),
        ("web/package-lock.json", "package-lock.json", True),
    ])
    def test_matches(self, path, pattern, expected):
        assert matches_glob(path, pattern) is expected


class TestEnumerateFiles:
    def test_default_selection(self, write_tree):
        root = write_tree({
            "app.py": "x = 1\n",
            "src/config.yaml": "a: 1\n",
            ".env": "A=1\n",
            "README.md": "docs\n",
            "logo.png": b"\x89PNG",
            "node_modules/lib/index.js": "module.exports = 1\n",
            "dist/bundle.js": "x\n",
            "static/app.min.js": "x\n",
            "package-lock.json": "{}\n",
        })
        found = [p.relative_to(root).as_posix() for p in enumerate_files(root)]
        assert found == [".env", "app.py", "src/config.yaml"]

    def test_sorted(self, write_tree):
        root = write_tree({"b.py": "", "a.py": "", "c/a.py": ""})
        found = [p.relative_to(root).as_posix() for p in enumerate_files(root)]
        assert found == sorted(found)

    def test_empty_include(self, write_tree):
        root = write_tree({"app.py": "x = 1\n"})
        assert enumerate_files(root, include=(), exclude=DEFAULT_EXCLUDES) == []

    def test_extra_exclude(self, write_tree):
        root = write_tree({"app.py": "", "fixtures/keys.py": ""})
        found = enumerate_files(root, DEFAULT_INCLUDES, DEFAULT_EXCLUDES + ("fixtures/**",))
        assert [p.name for p in found] == ["app.py"]

    def test_custom_include(self, write_tree):
        root = write_tree({"app.py": "", "notes.txt": ""})
        found = enumerate_files(root, include=("*.txt",), exclude=())
        assert [p.name for p in found] == ["notes.txt"]


class TestReadText:
    def test_utf8(self, tmp_path):
        p = tmp_path / "a.py"
        p.write_text("héllo\n", encoding="utf-8")
        assert read_text(p) == "héllo\n"

    def test_binary(self, tmp_path):
        p = tmp_path / "a.py"
        p.write_bytes(b"abc\x00def")
        with pytest.raises(FileSkipped):
            read_text(p)

    def test_oversized(self, tmp_path):
        p = tmp_path / "big.py"
        p.write_text("x" * 2048)
        with pytest.raises(FileSkipped):
            read_text(p, max_bytes=1024)
        assert len(read_text(p, max_bytes=4096)) == 2048

    def test_invalid_utf8(self, tmp_path):
        p = tmp_path / "bad.py"
        p.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(UnicodeDecodeError):
            read_text(p)

    def test_missing(self, tmp_path):
        with pytest.raises(OSError):
            read_text(tmp_path / "gone.py")


class TestDirectoryPruning:
    @pytest.mark.parametrize("rel_dir,pattern,expected", [
        ("node_modules", "node_modules/**", True),
        ("node_modules", "**/node_modules/**", True),
        ("web/node_modules", "**/node_modules/**", True),
        ("web/node_modules", "node_modules/**", False),
        ("assets.map", "*.map", False),
        ("fixtures", "fixtures", False),
    ])
    def test_dir_excluded(self, rel_dir, pattern, expected):
        assert _dir_excluded(rel_dir, (pattern,)) is expected

    def test_double_star_prunes_root_dir(self, write_tree, monkeypatch):
        root = write_tree({"node_modules/lib/index.js": "x\n", "app.js": "x\n"})
        walked = []
        real_walk = os.walk

        def recording_walk(top):
            for dirpath, dirnames, filenames in real_walk(top):
                walked.append(Path(dirpath).relative_to(root).as_posix())
                yield dirpath, dirnames, filenames

        monkeypatch.setattr(files.os, "walk", recording_walk)
        found = enumerate_files(root, ("**/*.js",), ("**/node_modules/**",))
        assert [p.name for p in found] == ["app.js"]
        assert walked == ["."]

    def test_extension_exclude_keeps_directory(self, write_tree):
        root = write_tree({"assets.map/app.py": "x = 1\n", "bundle.map": "{}\n"})
        found = [p.relative_to(root).as_posix() for p in enumerate_files(root)]
        assert found == ["assets.map/app.py"]
