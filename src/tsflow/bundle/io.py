"""Declaration files on disk: discovery, reads, per-file writes and the bundle.

A bundle is one `.js.flow` file holding every wrapped module declaration of a
package, in discovery order, separated by a blank line. It is never re-sorted
by module name.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Sequence

from tsflow.core.model import INPUT_SUFFIX, SourceFile, WrappedOutput

logger = logging.getLogger(__name__)

BUNDLE_SEPARATOR = "\n\n"
_EXCLUDED_DIR = "node_modules"


def _write_text_exact(path: Path, text: str) -> None:
    # newline="" prevents Python from translating newlines on write
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)


def _read_text_exact(path: Path) -> str:
    with Path(path).open("r", encoding="utf-8", newline="") as f:
        return f.read()


def discover_declaration_files(root: str | Path) -> list[Path]:
    """Return every `*.d.ts` file under `root`, skipping nested `node_modules`.

    Paths are absolute and sorted by their POSIX path relative to `root` so the
    order (and therefore the bundle) is deterministic.
    """
    root = Path(root).resolve()
    found: list[tuple[str, Path]] = []
    for p in root.rglob(f"*{INPUT_SUFFIX}"):
        if not p.is_file():
            continue
        rel = p.relative_to(root)
        if _EXCLUDED_DIR in rel.parts[:-1]:
            continue
        found.append((rel.as_posix(), p))
    return [p for _, p in sorted(found, key=lambda item: item[0])]


def read_sources(paths: Sequence[Path], *, max_workers: int | None = None) -> list[SourceFile]:
    """Read all files concurrently; result order matches `paths`."""
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        contents = list(pool.map(_read_text_exact, paths))
    return [SourceFile(path=Path(p), content=c) for p, c in zip(paths, contents)]


def write_output(output: WrappedOutput) -> Path:
    _write_text_exact(output.output_path, output.content)
    return output.output_path


def write_outputs(outputs: Sequence[WrappedOutput], *, max_workers: int | None = None) -> list[Path]:
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(write_output, outputs))


def join_bundle(contents: Iterable[str]) -> str:
    return BUNDLE_SEPARATOR.join(contents)


def write_bundle(outputs: Sequence[WrappedOutput], bundle_path: str | Path) -> Path:
    """Write the bundle, creating its parent directory if absent."""
    path = Path(bundle_path)
    logger.info("Generating bundle at %s", path)
    _write_text_exact(path, join_bundle(o.content for o in outputs))
    return path
