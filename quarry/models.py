"""Data models for mined struct metadata."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

PATH_SEPARATOR = "::"


class Shape(Enum):
    """Whether a struct has named fields, positional fields, or none."""

    NAMED = "named"
    TUPLE = "tuple"
    UNIT = "unit"


@dataclass(frozen=True)
class FieldInfo:
    """Represents one field of a struct, public or not."""

    name: str  # "0", "1", ... for tuple structs
    type_name: str
    is_public: bool
    owner_path: str


@dataclass(frozen=True)
class StructInfo:
    """Represents a struct stored in the registry under `full_path`."""

    full_path: str  # e.g. alloc::string::String
    simple_name: str
    module_path: str
    shape: Shape = Shape.NAMED
    fields: tuple[FieldInfo, ...] = field(default_factory=tuple)

    @classmethod
    def from_path(
        cls,
        full_path: str,
        shape: Shape = Shape.NAMED,
        fields: tuple[FieldInfo, ...] = (),
    ) -> "StructInfo":
        """Create a StructInfo, splitting module path and simple name at `::`."""
        module_path, simple_name = split_path(full_path)
        return cls(full_path, simple_name, module_path, shape, tuple(fields))

    def renamed(self, full_path: str) -> "StructInfo":
        """Return a copy presented under another path, e.g. a `std::` alias."""
        module_path, simple_name = split_path(full_path)
        return replace(
            self,
            full_path=full_path,
            simple_name=simple_name,
            module_path=module_path,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "full_path": self.full_path,
            "simple_name": self.simple_name,
            "module_path": self.module_path,
            "shape": self.shape.value,
            "fields": [
                {
                    "name": f.name,
                    "type_name": f.type_name,
                    "is_public": f.is_public,
                    "owner_path": f.owner_path,
                }
                for f in self.fields
            ],
        }


def split_path(full_path: str) -> tuple[str, str]:
    """Split `a::b::C` into (`a::b`, `C`); a bare name has no module path."""
    module_path, sep, simple_name = full_path.rpartition(PATH_SEPARATOR)
    if not sep:
        return "", full_path
    return module_path, simple_name
