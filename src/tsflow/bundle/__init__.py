"""Declaration file I/O and bundling."""

from __future__ import annotations

from .io import (
    BUNDLE_SEPARATOR,
    discover_declaration_files,
    join_bundle,
    read_sources,
    write_bundle,
    write_output,
    write_outputs,
)

__all__ = [
    "BUNDLE_SEPARATOR",
    "discover_declaration_files",
    "read_sources",
    "write_output",
    "write_outputs",
    "join_bundle",
    "write_bundle",
]
