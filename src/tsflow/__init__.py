"""tsflow: Flow module declarations from TypeScript ambient declarations.

Converts a directory of `.d.ts` files (typically `@types/<name>`) into
`declare module` blocks and bundles them into a single `.js.flow` file.
"""

from __future__ import annotations

from tsflow.core import PackageContext, SourceFile, WrappedOutput
from tsflow.errors import ExternalToolError, NoDeclarationFilesError, TsflowError
from tsflow.pipeline import ConversionResult, ConvertOptions, convert_package, convert_sources

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "PackageContext",
    "SourceFile",
    "WrappedOutput",
    "ConvertOptions",
    "ConversionResult",
    "convert_package",
    "convert_sources",
    "TsflowError",
    "NoDeclarationFilesError",
    "ExternalToolError",
]
