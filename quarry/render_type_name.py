"""Render decoded type trees as short display names."""

from quarry.type_node import (
    GenericParam,
    Primitive,
    ResolvedPath,
    TupleType,
    TypeNode,
)

CRATE_PREFIX = "crate::"
UNKNOWN_TYPE_NAME = "unknown"

# Crate-internal container paths shown under their public short names.
CONTAINER_REWRITES: dict[str, str] = {
    "vec::Vec": "Vec",
    "string::String": "String",
    "collections::hash_map::HashMap": "HashMap",
    "collections::hash_set::HashSet": "HashSet",
}


def render_type_name(node: TypeNode) -> str:
    """Render a type tree, e.g. `Vec<u8>` or `(i32, String)`."""
    if isinstance(node, (Primitive, GenericParam)):
        return node.name
    if isinstance(node, ResolvedPath):
        name = _short_path_name(node.path)
        if node.args:
            return f"{name}<{', '.join(render_type_name(a) for a in node.args)}>"
        return name
    if isinstance(node, TupleType):
        return f"({', '.join(render_type_name(e) for e in node.elements)})"
    return UNKNOWN_TYPE_NAME


def _short_path_name(path: str) -> str:
    stripped = path.removeprefix(CRATE_PREFIX)
    if stripped in CONTAINER_REWRITES:
        return CONTAINER_REWRITES[stripped]
    return stripped.rsplit("::", 1)[-1]
