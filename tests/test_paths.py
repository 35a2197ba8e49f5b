from __future__ import annotations

from pathlib import Path

import pytest

from tsflow.core.paths import is_relative, module_name, resolve_module_id


def test_index_file_resolves_to_package_name(tmp_path: Path) -> None:
    module_id = resolve_module_id(tmp_path, tmp_path / "index.js.flow")
    assert module_id == "index"
    assert module_name("bar", module_id) == "bar"


@pytest.mark.parametrize(
    "rel, expected",
    [
        ("foo.js.flow", "foo"),
        ("lib/util.js.flow", "lib/util"),
        ("lib/index.js.flow", "lib/index"),
        ("a/b/c.js.flow", "a/b/c"),
    ],
)
def test_nested_files_keep_full_relative_path(tmp_path: Path, rel: str, expected: str) -> None:
    module_id = resolve_module_id(tmp_path, tmp_path / rel)
    assert module_id == expected
    assert module_name("bar", module_id) == f"bar/{expected}"


def test_path_without_output_suffix_is_only_relativized(tmp_path: Path) -> None:
    assert resolve_module_id(tmp_path, tmp_path / "lib" / "foo") == "lib/foo"


def test_package_root_directory_maps_to_index(tmp_path: Path) -> None:
    assert resolve_module_id(tmp_path, tmp_path) == "index"


@pytest.mark.parametrize("specifier", ["react", "@types/node", "lib/something"])
def test_bare_specifiers_pass_through(tmp_path: Path, specifier: str) -> None:
    assert resolve_module_id(tmp_path, specifier) == specifier


def test_module_name_branches() -> None:
    assert module_name("pkg", "index") == "pkg"
    assert module_name("pkg", "lib/x") == "pkg/lib/x"
    assert module_name("@scope/pkg", "x") == "@scope/pkg/x"


@pytest.mark.parametrize("specifier", [".", "..", "./foo", "../foo", "../../a/b"])
def test_is_relative_accepts_dot_paths(specifier: str) -> None:
    assert is_relative(specifier)


@pytest.mark.parametrize("specifier", ["react", "@types/node", "lib/something"])
def test_is_relative_rejects_bare_names(specifier: str) -> None:
    assert not is_relative(specifier)


def test_is_relative_is_permissive_for_dotted_bare_names() -> None:
    # Known edge case: any dot counts, so dotted package names look relative.
    assert is_relative("lodash.merge")
