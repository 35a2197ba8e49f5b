"""Subprocess helper shared by the external tool wrappers."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from tsflow.errors import ExternalToolError

logger = logging.getLogger(__name__)


def run_tool(
    command: Sequence[str],
    *,
    input_text: str | None = None,
    cwd: str | Path | None = None,
    capture: bool = True,
) -> str:
    """Run `command` and return its stdout.

    With `capture=False` output is inherited from the parent process (used for
    package installs) and "" is returned.

    Raises:
        ExternalToolError: on a missing executable or a non-zero exit status.
    """
    cmd = [str(c) for c in command]
    logger.debug("running %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            input=input_text,
            cwd=None if cwd is None else str(cwd),
            capture_output=capture,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except FileNotFoundError as e:
        raise ExternalToolError(cmd) from e

    if proc.returncode != 0:
        raise ExternalToolError(cmd, returncode=proc.returncode, stderr=proc.stderr or "")
    return proc.stdout if capture else ""
