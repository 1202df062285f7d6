"""Data model for raw rustdoc index entries."""

from dataclasses import dataclass
from typing import Any

from quarry.type_node import TypeNode, decode_type_node


@dataclass(frozen=True)
class StructLike:
    """A struct definition: its kind tag and the ids of its fields."""

    shape_tag: str | None
    field_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class FieldLike:
    """A struct field carrying its type tree."""

    type_node: TypeNode


@dataclass(frozen=True)
class OtherItem:
    """Any other item kind (functions, modules, enums, ...)."""


ItemKind = StructLike | FieldLike | OtherItem


@dataclass(frozen=True)
class ItemRecord:
    """Represents one entry of the rustdoc `index` object."""

    name: str | None
    source_location: str | None  # span.filename, e.g. alloc/src/string.rs
    is_public: bool
    kind: ItemKind

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> "ItemRecord":
        """Decode a raw item object field by field."""
        name = raw.get("name")
        span = raw.get("span")
        filename = span.get("filename") if isinstance(span, dict) else None
        return cls(
            name=name if isinstance(name, str) else None,
            source_location=filename if isinstance(filename, str) else None,
            # Restricted visibility ({"restricted": {...}}) counts as private.
            is_public=raw.get("visibility") == "public",
            kind=_decode_kind(raw.get("inner")),
        )


def _decode_kind(inner: Any) -> ItemKind:
    if not isinstance(inner, dict):
        return OtherItem()
    if "struct" in inner:
        return _decode_struct(inner["struct"])
    if "struct_field" in inner:
        return FieldLike(decode_type_node(inner["struct_field"]))
    return OtherItem()


def _decode_struct(payload: Any) -> StructLike:
    """Decode `{"kind": {"plain": {"fields": [...]}}}` and its variants."""
    kind = payload.get("kind") if isinstance(payload, dict) else None
    if isinstance(kind, str):
        return StructLike(kind)
    if not isinstance(kind, dict) or not kind:
        return StructLike(None)

    for tag in ("plain", "tuple", "unit"):
        if tag in kind:
            return StructLike(tag, _field_ids(kind[tag]))

    # Unrecognized tag; keep it so the extractor can report it.
    return StructLike(next(iter(kind)))


def _field_ids(body: Any) -> tuple[int, ...]:
    if not isinstance(body, dict):
        return ()
    ids = body.get("fields")
    if not isinstance(ids, list):
        return ()
    # Stripped tuple fields show up as null.
    return tuple(i for i in ids if isinstance(i, int) and not isinstance(i, bool))
