"""Tests for the StructInfo and FieldInfo models."""

import json

import pytest

from quarry.models import FieldInfo, Shape, StructInfo, split_path


@pytest.mark.parametrize(
    ("full_path", "expected"),
    [
        ("alloc::string::String", ("alloc::string", "String")),
        ("std::collections::HashMap", ("std::collections", "HashMap")),
        ("alloc::Global", ("alloc", "Global")),
        ("Local", ("", "Local")),
    ],
)
def test_split_path(full_path: str, expected: tuple[str, str]) -> None:
    """Verify paths split at the last separator."""
    assert split_path(full_path) == expected


def test_from_path_defaults() -> None:
    """Verify a new StructInfo is a fieldless named struct."""
    info = StructInfo.from_path("alloc::string::String")
    assert info.module_path == "alloc::string"
    assert info.simple_name == "String"
    assert info.shape is Shape.NAMED
    assert info.fields == ()


def test_renamed_recomputes_components() -> None:
    """Verify renaming re-splits the new path and keeps the fields."""
    field = FieldInfo("vec", "Vec<u8>", False, "alloc::string::String")
    info = StructInfo.from_path("alloc::string::String", fields=(field,))
    renamed = info.renamed("std::string::String")

    assert renamed.full_path == "std::string::String"
    assert renamed.module_path == "std::string"
    assert renamed.simple_name == "String"
    assert renamed.fields == (field,)
    assert info.full_path == "alloc::string::String"


def test_struct_info_is_frozen() -> None:
    """Verify descriptors cannot be modified after creation."""
    info = StructInfo.from_path("core::cell::Cell")
    with pytest.raises(AttributeError):
        info.full_path = "x"  # type: ignore[misc]


def test_to_dict_is_json_ready() -> None:
    """Verify the dict form serializes with shape values and field order."""
    info = StructInfo.from_path(
        "alloc::geom::Point",
        Shape.TUPLE,
        (
            FieldInfo("0", "i32", True, "alloc::geom::Point"),
            FieldInfo("1", "i32", True, "alloc::geom::Point"),
        ),
    )
    data = json.loads(json.dumps(info.to_dict()))
    assert data["shape"] == "tuple"
    assert data["module_path"] == "alloc::geom"
    assert [f["name"] for f in data["fields"]] == ["0", "1"]
    assert data["fields"][0] == {
        "name": "0",
        "type_name": "i32",
        "is_public": True,
        "owner_path": "alloc::geom::Point",
    }
