from __future__ import annotations

import pytest

from tsflow.core.wrap import unwrap_declare_module, wrap_declare_module


def test_wrap_layout() -> None:
    content = "declare export interface Thing {\n  x: number;\n}\n"
    out = wrap_declare_module(content, "bar/lib/util")
    assert out.split("\n") == [
        "// Generated from @types/bar/lib/util using tsflow",
        'declare module "bar/lib/util" {',
        "  declare export interface Thing {",
        "    x: number;",
        "  }",
        "",
        "}",
    ]


def test_wrap_leaves_empty_lines_empty() -> None:
    out = wrap_declare_module("a;\n\nb;", "bar")
    assert "\n\n" in out
    assert not any(line.isspace() for line in out.split("\n"))


@pytest.mark.parametrize(
    "content",
    [
        "",
        "declare export type Id = string;",
        'import type * as Foo from "bar/foo";\n\ndeclare export var x: Foo;\n',
        "  already indented\n\n\n  twice\n",
        "   \n",
    ],
)
def test_unwrap_inverts_wrap(content: str) -> None:
    assert unwrap_declare_module(wrap_declare_module(content, "bar")) == content


@pytest.mark.parametrize(
    "text",
    [
        "declare module \"bar\" {\n}",
        "no comment\ndeclare module \"bar\" {\n  x\n}",
        "// c\nmodule bar {\n  x\n}",
        "// c\ndeclare module \"bar\" {\n  x\n",
    ],
)
def test_unwrap_rejects_malformed_text(text: str) -> None:
    with pytest.raises(ValueError, match="unwrap_declare_module"):
        unwrap_declare_module(text)
