"""Default scan globs, suppression keywords and starter .repohygiene.toml template."""

from typing import Tuple

DEFAULT_INCLUDES: Tuple[str, ...] = (
    "**/*.js",
    "**/*.ts",
    "**/*.jsx",
    "**/*.tsx",
    "**/*.json",
    "**/*.yaml",
    "**/*.yml",
    "**/*.env*",
    "**/*.config.*",
    "**/*.toml",
    "**/*.ini",
    "**/*.conf",
    "**/*.sh",
    "**/*.bash",
    "**/*.py",
    "**/*.rb",
    "**/*.go",
    "**/*.java",
    "**/*.properties",
    "**/*.xml",
)

DEFAULT_EXCLUDES: Tuple[str, ...] = (
    "node_modules/**",
    "dist/**",
    "build/**",
    ".git/**",
    "coverage/**",
    "*.min.js",
    "*.min.css",
    "*.map",
    "*.lock",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "*.png",
    "*.jpg",
    "*.jpeg",
    "*.gif",
    "*.svg",
    "*.ico",
    "*.woff",
    "*.woff2",
    "*.ttf",
    "*.eot",
)

# Matched case-insensitively against the whole source line.
DEFAULT_SUPPRESSION_KEYWORDS: Tuple[str, ...] = (
    "example",
    "sample",
    "test",
    "mock",
    "fake",
    "dummy",
    "placeholder",
    "your_",
    "xxx",
    "<your",
    "insert",
    "replace",
    "todo",
    "fixme",
)

DEFAULT_TOML = """\
# repohygiene configuration
version = "1.0"

[secrets]
entropy_threshold = 4.5
# include = ["**/*.py", "**/*.env*"]     # empty = built-in defaults
# exclude = ["fixtures/**"]               # appended to built-in excludes
# suppression_keywords = ["example", "dummy"]
# max_workers = 8
max_file_size_kb = 1024
patterns_dir = ".repohygiene-patterns"

[output]
format = "terminal"       # terminal | json | sarif
fail_on = "high"          # low | medium | high | never
"""
