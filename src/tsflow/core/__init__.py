"""tsflow core: data model, module naming, rewrite rules and wrapping.

This package is pure text/path logic and must not import the pipeline,
external tools or the CLI.
"""

from __future__ import annotations

from .model import (
    INDEX_MODULE_ID,
    INPUT_SUFFIX,
    OUTPUT_SUFFIX,
    PackageContext,
    SourceFile,
    WrappedOutput,
    output_path_for,
)
from .paths import is_relative, module_name, resolve_module_id
from .rewrite import PRE_COMPILE_RULES, RULES, RewriteRule, RewriteScope, rewrite
from .wrap import unwrap_declare_module, wrap_declare_module

__all__ = [
    "INDEX_MODULE_ID",
    "INPUT_SUFFIX",
    "OUTPUT_SUFFIX",
    "PackageContext",
    "SourceFile",
    "WrappedOutput",
    "output_path_for",
    "is_relative",
    "module_name",
    "resolve_module_id",
    "RULES",
    "PRE_COMPILE_RULES",
    "RewriteRule",
    "RewriteScope",
    "rewrite",
    "wrap_declare_module",
    "unwrap_declare_module",
]
