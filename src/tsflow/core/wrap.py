"""`declare module` wrapping.

The wrapper is the last step applied to a file: Flow requires every statement
of a module declaration to be nested inside the block.
"""

from __future__ import annotations

INDENT = "  "

_PROVENANCE = "// Generated from @types/{module_name} using tsflow"
_OPEN = 'declare module "{module_name}" {{'
_CLOSE = "}"


def indent(text: str, prefix: str = INDENT) -> str:
    # Empty lines stay empty so no trailing whitespace is injected.
    return "\n".join(prefix + line if line != "" else line for line in text.split("\n"))


def dedent(text: str, prefix: str = INDENT) -> str:
    return "\n".join(line[len(prefix):] if line.startswith(prefix) else line for line in text.split("\n"))


def wrap_declare_module(content: str, module_name: str) -> str:
    """Wrap `content` in a provenance comment and `declare module "<module_name>" { ... }`."""
    return "\n".join(
        [
            _PROVENANCE.format(module_name=module_name),
            _OPEN.format(module_name=module_name),
            indent(content),
            _CLOSE,
        ]
    )


def unwrap_declare_module(text: str) -> str:
    """Inverse of `wrap_declare_module`.

    Raises:
        ValueError: if `text` is not shaped like a wrapped declaration.
    """
    lines = text.split("\n")
    if len(lines) < 4:
        raise ValueError("unwrap_declare_module: too few lines for a wrapped declaration")
    if not lines[0].startswith("//"):
        raise ValueError("unwrap_declare_module: missing provenance comment")
    if not (lines[1].startswith('declare module "') and lines[1].endswith('" {')):
        raise ValueError(f"unwrap_declare_module: expected module header, got {lines[1]!r}")
    if lines[-1] != _CLOSE:
        raise ValueError("unwrap_declare_module: missing closing brace")
    return dedent("\n".join(lines[2:-1]))
