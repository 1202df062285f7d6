"""Tests for the std alias table."""

from pathlib import Path

import pytest

from quarry.alias_table import AliasTable, load_alias_file, load_alias_table


def test_bundled_table_contains_common_reexports() -> None:
    """Verify well-known std re-exports resolve to their canonical paths."""
    table = load_alias_table()
    assert table.resolve("std::string::String") == "alloc::string::String"
    assert table.resolve("std::vec::Vec") == "alloc::vec::Vec"
    assert table.resolve("std::cell::OnceCell") == "core::cell::once::OnceCell"
    assert table.resolve("std::sync::Mutex") == "std::sync::poison::mutex::Mutex"
    assert table.resolve("std::fs::File") == "std::fs::File"


def test_bundled_table_is_loaded_once() -> None:
    """Verify the bundled table is cached."""
    assert load_alias_table() is load_alias_table()


def test_bundled_table_entries_are_paths() -> None:
    """Verify every entry is a std alias mapping to a full path."""
    table = load_alias_table()
    assert len(table) > 200
    for alias, canonical in table.items():
        assert alias.startswith("std::")
        assert canonical.split("::")[0] in {"std", "alloc", "core"}
        assert canonical.rsplit("::", 1)[-1] == alias.rsplit("::", 1)[-1]


@pytest.mark.parametrize(
    "name",
    ["String", "std::String", "STD::STRING::STRING", "std::string::String ", ""],
)
def test_resolution_is_exact_match_only(name: str) -> None:
    """Verify no normalization or partial matching is applied."""
    assert load_alias_table().resolve(name) is None


def test_merged_adds_and_overrides() -> None:
    """Verify merging returns a new table and leaves the original intact."""
    base = AliasTable({"a::X": "b::X", "a::Y": "b::Y"})
    merged = base.merged({"a::Y": "c::Y", "a::Z": "c::Z"})

    assert merged.resolve("a::X") == "b::X"
    assert merged.resolve("a::Y") == "c::Y"
    assert merged.resolve("a::Z") == "c::Z"
    assert base.resolve("a::Z") is None
    assert len(base) == 2


def test_table_is_read_only() -> None:
    """Verify the table cannot be mutated in place."""
    table = AliasTable({"a::X": "b::X"})
    with pytest.raises(TypeError):
        table["a::Y"] = "b::Y"  # type: ignore[index]


def test_load_alias_file(tmp_path: Path) -> None:
    """Verify alias files are read as a mapping of strings."""
    alias_file = tmp_path / "aliases.yml"
    alias_file.write_text('"std::x::Foo": "core::x::foo::Foo"\n', encoding="utf-8")
    assert load_alias_file(alias_file) == {"std::x::Foo": "core::x::foo::Foo"}

    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert load_alias_file(empty) == {}


def test_load_alias_file_rejects_lists(tmp_path: Path) -> None:
    """Verify alias files must contain a mapping."""
    alias_file = tmp_path / "aliases.yml"
    alias_file.write_text("- std::x::Foo\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_alias_file(alias_file)
