"""External collaborators: flowgen, prettier and the types installer."""

from __future__ import annotations

from .flowgen import flowgen_compile
from .installer import default_install_command, resolve_source_directory
from .prettier import prettier_format

__all__ = [
    "flowgen_compile",
    "prettier_format",
    "default_install_command",
    "resolve_source_directory",
]
