"""`tsflow convert` command.

Converts the `.d.ts` files of `@types/<name>` (or of `--package-dir`) into
sibling `.js.flow` module declarations and writes a bundle suitable for
flow-typed.

Exit codes:
- 0: success (the bundle path is printed)
- 1: conversion failed (no declaration files, external tool or I/O error)
- 2: invalid usage
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from tsflow.errors import TsflowError
from tsflow.pipeline import ConvertOptions, convert_package

logger = logging.getLogger(__name__)


def register(app: typer.Typer) -> None:
    @app.command("convert")
    def convert(
        package_name: str = typer.Option(..., "--package-name", help="The name of the package."),
        package_dir: Optional[str] = typer.Option(
            None,
            "--package-dir",
            help="Generate types for this directory instead of installing `@types/<package-name>`.",
        ),
        bundle_path: Optional[str] = typer.Option(
            None,
            "--bundle-path",
            help="Bundle output path (default: <package-dir>/<package-name>.js.flow).",
        ),
        types_install_script: Optional[str] = typer.Option(
            None,
            "--types-install-script",
            help="Command used to install `@types/<package-name>` (default: npm install --save-dev).",
        ),
        jobs: Optional[int] = typer.Option(None, "--jobs", "-j", min=1, help="Worker threads for I/O and conversion."),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log external tool invocations."),
    ) -> None:
        """Generate Flow declarations and a bundle from a TypeScript @types package."""
        if not package_name.strip():
            raise typer.BadParameter("--package-name must not be empty")

        logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")
        if package_dir is not None and types_install_script is not None:
            logger.warning("Ignoring --types-install-script: --package-dir %s is used as-is", package_dir)
            types_install_script = None

        options = ConvertOptions(
            package_name=package_name.strip(),
            package_dir=Path(package_dir) if package_dir else None,
            bundle_path=Path(bundle_path) if bundle_path else None,
            types_install_script=types_install_script,
            max_workers=jobs,
        )
        try:
            result = convert_package(options)
        except (TsflowError, OSError) as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=1) from e

        typer.echo(str(result.bundle_path))
