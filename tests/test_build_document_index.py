"""Tests for decoding rustdoc JSON into the item index."""

import json

import pytest

from quarry.build_document_index import build_document_index
from quarry.errors import MalformedInputError
from quarry.item_record import FieldLike, ItemRecord, OtherItem, StructLike
from quarry.type_node import Primitive


def test_build_index_decodes_items() -> None:
    """Verify structs, fields and other items are classified."""
    raw = {
        "root": 0,
        "index": {
            "1": {
                "name": "String",
                "span": {"filename": "alloc/src/string.rs"},
                "visibility": "public",
                "inner": {"struct": {"kind": {"plain": {"fields": [2]}}}},
            },
            "2": {
                "name": "vec",
                "visibility": {"restricted": {"parent": 1, "path": "::string"}},
                "inner": {"struct_field": {"primitive": "u8"}},
            },
            "3": {"name": "from_utf8", "inner": {"function": {}}},
        },
    }
    index = build_document_index(json.dumps(raw))

    assert index["1"] == ItemRecord(
        name="String",
        source_location="alloc/src/string.rs",
        is_public=True,
        kind=StructLike("plain", (2,)),
    )
    assert index["2"].kind == FieldLike(Primitive("u8"))
    assert index["2"].is_public is False
    assert index["3"].kind == OtherItem()


def test_build_index_skips_non_object_entries() -> None:
    """Verify entries that are not objects are left out."""
    index = build_document_index('{"index": {"1": null, "2": [], "3": {}}}')
    assert list(index) == ["3"]
    assert index["3"] == ItemRecord(None, None, False, OtherItem())


@pytest.mark.parametrize(
    "raw_text",
    ["not json", "[]", '"index"', "{}", '{"index": []}', '{"index": null}'],
)
def test_build_index_rejects_malformed_input(raw_text: str) -> None:
    """Verify undecodable documents raise MalformedInputError."""
    with pytest.raises(MalformedInputError):
        build_document_index(raw_text)


@pytest.mark.parametrize(
    ("inner", "expected"),
    [
        ({"struct": {"kind": {"tuple": {"fields": [5, None, 6]}}}}, ("tuple", (5, 6))),
        ({"struct": {"kind": {"unit": {}}}}, ("unit", ())),
        ({"struct": {"kind": "unit"}}, ("unit", ())),
        ({"struct": {"kind": {"plain": {"fields": [True, "7", 8]}}}}, ("plain", (8,))),
        ({"struct": {"kind": {"plain": {}}}}, ("plain", ())),
        ({"struct": {"kind": {"weird": {"fields": [1]}}}}, ("weird", ())),
        ({"struct": {}}, (None, ())),
        ({"struct": None}, (None, ())),
    ],
)
def test_struct_payload_decoding(inner: dict, expected: tuple) -> None:
    """Verify struct kinds and field id lists are decoded defensively."""
    record = ItemRecord.from_raw({"name": "S", "inner": inner})
    assert isinstance(record.kind, StructLike)
    assert (record.kind.shape_tag, record.kind.field_ids) == expected


def test_item_record_ignores_wrongly_typed_fields() -> None:
    """Verify non-string names and spans decode as missing."""
    record = ItemRecord.from_raw(
        {"name": 12, "span": {"filename": None}, "visibility": "crate", "inner": 3}
    )
    assert record == ItemRecord(None, None, False, OtherItem())
