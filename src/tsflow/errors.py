"""Error taxonomy for tsflow runs.

Every failure aborts the whole run; there is no per-file isolation or retry.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class TsflowError(Exception):
    """Base class for conversion failures reported to the user."""


class NoDeclarationFilesError(TsflowError, ValueError):
    """Raised before any compile/write when discovery finds no `.d.ts` files."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        super().__init__(f"No .d.ts files were found at {self.directory}")


class ExternalToolError(TsflowError, RuntimeError):
    """An external tool (flowgen, prettier, the package installer) failed.

    The message is stable: the command, its exit status and its stderr.
    """

    def __init__(self, command: Sequence[str], *, returncode: int | None = None, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        cmd = " ".join(self.command)
        if returncode is None:
            msg = f"{cmd}: executable not found"
        else:
            msg = f"{cmd}: exited with status {returncode}"
        detail = stderr.strip()
        if detail:
            msg += f"\n{detail}"
        super().__init__(msg)
