from __future__ import annotations

from pathlib import Path

from conftest import make_types_tree

from tsflow.bundle.io import (
    discover_declaration_files,
    join_bundle,
    read_sources,
    write_bundle,
    write_outputs,
)
from tsflow.core.model import WrappedOutput, output_path_for


def test_discovery_is_recursive_sorted_and_skips_node_modules(tmp_path: Path) -> None:
    root = make_types_tree(
        tmp_path / "types",
        {
            "index.d.ts": "",
            "lib/util.d.ts": "",
            "a.d.ts": "",
            "lib/readme.md": "",
            "lib/impl.ts": "",
            "node_modules/dep/index.d.ts": "",
            "lib/node_modules/dep/x.d.ts": "",
        },
    )
    found = discover_declaration_files(root)
    assert [p.relative_to(root.resolve()).as_posix() for p in found] == ["a.d.ts", "index.d.ts", "lib/util.d.ts"]
    assert all(p.is_absolute() for p in found)


def test_discovery_of_empty_directory(tmp_path: Path) -> None:
    assert discover_declaration_files(tmp_path) == []


def test_read_sources_preserves_order_and_content(tmp_path: Path) -> None:
    root = make_types_tree(tmp_path, {"b.d.ts": "B\r\n", "a.d.ts": "A\n"})
    paths = [root / "b.d.ts", root / "a.d.ts"]
    sources = read_sources(paths, max_workers=2)
    assert [s.path for s in sources] == paths
    assert [s.content for s in sources] == ["B\r\n", "A\n"]


def test_output_path_swaps_extension(tmp_path: Path) -> None:
    assert output_path_for(tmp_path / "lib" / "util.d.ts") == tmp_path / "lib" / "util.js.flow"


def test_write_outputs_and_bundle(tmp_path: Path) -> None:
    outputs = [
        WrappedOutput(output_path=tmp_path / "z.js.flow", module_name="p/z", content="Z"),
        WrappedOutput(output_path=tmp_path / "a.js.flow", module_name="p/a", content="A"),
    ]
    written = write_outputs(outputs)
    assert written == [o.output_path for o in outputs]
    assert (tmp_path / "z.js.flow").read_text(encoding="utf-8") == "Z"

    bundle = write_bundle(outputs, tmp_path / "out" / "nested" / "p.js.flow")
    assert bundle.read_text(encoding="utf-8") == "Z\n\nA"


def test_join_bundle_keeps_given_order() -> None:
    assert join_bundle(["c", "a", "b"]) == "c\n\na\n\nb"
    assert join_bundle([]) == ""
