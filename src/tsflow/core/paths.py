"""Module identity: file paths to ModuleIds to declared module names."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .model import INDEX_MODULE_ID, OUTPUT_SUFFIX

# Any "." or ".." (optionally followed by "/") anywhere in the specifier.
# Dotted bare names such as "lodash.merge" are classified as relative too.
_RELATIVE_HINT_RE = re.compile(r"\.\.?/?")


def is_relative(specifier: str) -> bool:
    return _RELATIVE_HINT_RE.search(specifier) is not None


def resolve_module_id(package_dir: str | Path, path: str | Path) -> str:
    """Resolve `path` to a package-relative, extension-stripped ModuleId.

    Absolute paths are made relative to `package_dir` with `/` separators and
    the `.js.flow` suffix removed; the package root file maps to "index".
    Non-absolute paths are bare specifiers and are returned unchanged.
    """
    p = str(path)
    if not os.path.isabs(p):
        return p

    if p.endswith(OUTPUT_SUFFIX):
        p = p[: -len(OUTPUT_SUFFIX)]

    rel = os.path.relpath(p, str(package_dir)).replace("\\", "/")
    if rel in (INDEX_MODULE_ID, "."):
        return INDEX_MODULE_ID
    return rel


def module_name(package_name: str, module_id: str) -> str:
    """Return the name a ModuleId is declared under."""
    if module_id == INDEX_MODULE_ID:
        return package_name
    return f"{package_name}/{module_id}"
