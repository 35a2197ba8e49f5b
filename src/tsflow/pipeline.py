"""Conversion pipeline: `.d.ts` sources → wrapped Flow module declarations.

Per file (independently, in parallel):

1. rewrite `import x = require(...)` (flowgen cannot parse it)
2. compile with the external compiler
3. format with the external formatter
4. apply the rewrite chain (`tsflow.core.rewrite.RULES`) in order
5. wrap in `declare module "<name>"`

Results are joined in discovery order before anything is bundled. Any failure
propagates and aborts the run.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence

from tsflow.bundle.io import discover_declaration_files, read_sources, write_bundle, write_outputs
from tsflow.core.model import OUTPUT_SUFFIX, PackageContext, SourceFile, WrappedOutput, output_path_for
from tsflow.core.paths import module_name, resolve_module_id
from tsflow.core.rewrite import PRE_COMPILE_RULES, RULES, rewrite
from tsflow.core.wrap import wrap_declare_module
from tsflow.errors import NoDeclarationFilesError

logger = logging.getLogger(__name__)

TextTransform = Callable[[str], str]


@dataclass(frozen=True)
class ConvertOptions:
    package_name: str
    package_dir: Optional[Path] = None
    bundle_path: Optional[Path] = None
    types_install_script: Optional[str] = None
    max_workers: Optional[int] = None


@dataclass(frozen=True)
class ConversionResult:
    package_dir: Path
    bundle_path: Path
    outputs: list[WrappedOutput]


def default_bundle_path(package_dir: Path, package_name: str) -> Path:
    return Path(package_dir) / f"{package_name}{OUTPUT_SUFFIX}"


def convert_source(
    context: PackageContext,
    source: SourceFile,
    *,
    compiler: TextTransform,
    formatter: TextTransform,
) -> WrappedOutput:
    """Convert one source file into its wrapped module declaration."""
    logger.info("Generating flow types from %s", source.path)

    output_path = output_path_for(source.path)
    name = module_name(context.package_name, resolve_module_id(context.package_dir, output_path))

    text = rewrite(source.content, context=context, output_path=output_path, rules=PRE_COMPILE_RULES)
    text = compiler(text)
    text = formatter(text)
    text = rewrite(text, context=context, output_path=output_path, rules=RULES)

    return WrappedOutput(output_path=output_path, module_name=name, content=wrap_declare_module(text, name))


def convert_sources(
    context: PackageContext,
    sources: Sequence[SourceFile],
    *,
    compiler: TextTransform,
    formatter: TextTransform,
    max_workers: int | None = None,
) -> list[WrappedOutput]:
    """Convert every source in parallel; the result keeps the order of `sources`."""
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda s: convert_source(context, s, compiler=compiler, formatter=formatter), sources))


def convert_package(
    options: ConvertOptions,
    *,
    compiler: TextTransform | None = None,
    formatter: TextTransform | None = None,
    resolve_source_directory: Callable[..., Path] | None = None,
) -> ConversionResult:
    """Run a full conversion: locate, discover, convert, write outputs and bundle.

    The collaborators default to flowgen, prettier and the npm installer from
    `tsflow.external`; tests inject their own.

    Raises:
        NoDeclarationFilesError: if no `.d.ts` file is found (nothing is
            compiled or written in that case).
    """
    if compiler is None or formatter is None or resolve_source_directory is None:
        from tsflow import external  # local import: only needed for real runs

        compiler = compiler or external.flowgen_compile
        formatter = formatter or external.prettier_format
        resolve_source_directory = resolve_source_directory or external.resolve_source_directory

    package_dir = Path(
        resolve_source_directory(
            options.package_name,
            package_dir=options.package_dir,
            install_command=options.types_install_script,
        )
    )
    bundle_path = Path(options.bundle_path) if options.bundle_path else default_bundle_path(package_dir, options.package_name)

    paths = discover_declaration_files(package_dir) if package_dir.is_dir() else []
    if not paths:
        raise NoDeclarationFilesError(package_dir)

    context = PackageContext(package_name=options.package_name, package_dir=package_dir.resolve())
    sources = read_sources(paths, max_workers=options.max_workers)
    outputs = convert_sources(context, sources, compiler=compiler, formatter=formatter, max_workers=options.max_workers)

    write_outputs(outputs, max_workers=options.max_workers)
    write_bundle(outputs, bundle_path)

    return ConversionResult(package_dir=package_dir, bundle_path=bundle_path, outputs=outputs)
