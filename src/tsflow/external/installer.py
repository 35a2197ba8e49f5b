"""Locate (and if needed install) the `@types/<name>` source directory.

This is the only place that touches the package manager or the process
working directory.
"""

from __future__ import annotations

import logging
import shlex
from pathlib import Path

from ._process import run_tool

logger = logging.getLogger(__name__)


def default_install_command(package_name: str) -> str:
    return f"npm install --save-dev @types/{package_name}"


def types_dir(package_name: str, *, cwd: str | Path | None = None) -> Path:
    base = Path.cwd() if cwd is None else Path(cwd)
    return (base / "node_modules" / "@types" / package_name).resolve()


def resolve_source_directory(
    package_name: str,
    *,
    package_dir: str | Path | None = None,
    install_command: str | None = None,
    cwd: str | Path | None = None,
) -> Path:
    """Return the directory holding the package's `.d.ts` files.

    An explicit `package_dir` is used as-is. Otherwise `@types/<package_name>`
    is installed with `install_command` (default: npm) and its
    `node_modules/@types/<package_name>` directory under `cwd` is returned.
    """
    if package_dir is not None:
        resolved = Path(package_dir).resolve()
        logger.info("Generating flow definitions for %s at %s", package_name, resolved)
        return resolved

    command = install_command or default_install_command(package_name)
    logger.info("Installing @types/%s", package_name)
    run_tool(shlex.split(command), cwd=cwd, capture=False)

    resolved = types_dir(package_name, cwd=cwd)
    logger.info("Generating flow definitions for %s at %s", package_name, resolved)
    return resolved
