"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import tsflow` to fail.

To keep things robust, we ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers
# =============================================================================


def identity(text: str) -> str:
    """Stand-in for flowgen/prettier: the pipeline tests assume compiled == input."""
    return text


def make_types_tree(root: Path, files: dict[str, str]) -> Path:
    """Create a fake `@types` package under `root` from {relative_path: content}."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding="utf-8")
    return root


def fixed_directory(path: Path):
    """A `resolve_source_directory` stand-in that never installs anything."""

    def _resolve(package_name: str, *, package_dir=None, install_command=None) -> Path:
        return Path(package_dir) if package_dir is not None else path

    return _resolve
