"""Data model for the declaration conversion pipeline.

All records are frozen dataclasses: sources and contexts are read-only inputs,
wrapped outputs are write-once results.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

INPUT_SUFFIX = ".d.ts"
OUTPUT_SUFFIX = ".js.flow"

# ModuleId of the package's root declaration file.
INDEX_MODULE_ID = "index"


@dataclass(frozen=True)
class SourceFile:
    path: Path
    content: str


@dataclass(frozen=True)
class PackageContext:
    """Per-run package identity.

    `package_name` is used verbatim in generated module names; `package_dir` is
    the directory every ModuleId is computed relative to.
    """

    package_name: str
    package_dir: Path

    def __post_init__(self) -> None:
        if not isinstance(self.package_name, str) or not self.package_name.strip():
            raise ValueError("package_name must be a non-empty string")
        if not Path(self.package_dir).is_dir():
            raise ValueError(f"package_dir is not an existing directory: {self.package_dir}")


@dataclass(frozen=True)
class WrappedOutput:
    output_path: Path
    module_name: str
    content: str


def output_path_for(path: Path) -> Path:
    """Return the sibling `.js.flow` path for a `.d.ts` input path."""
    p = Path(path)
    name = p.name
    if name.endswith(INPUT_SUFFIX):
        return p.with_name(name[: -len(INPUT_SUFFIX)] + OUTPUT_SUFFIX)
    return p.with_name(name + OUTPUT_SUFFIX)
