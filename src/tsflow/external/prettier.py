"""prettier formatter bridge.

flowgen emits loosely formatted code; formatting it with the `babel-flow`
parser puts each statement on its own line so the line-anchored rewrite rules
match.
"""

from __future__ import annotations

from pathlib import Path

from ._process import run_tool

PRETTIER_COMMAND = ("npx", "--no-install", "prettier", "--parser", "babel-flow")


def prettier_format(text: str, *, cwd: str | Path | None = None) -> str:
    return run_tool(PRETTIER_COMMAND, input_text=text, cwd=cwd)
