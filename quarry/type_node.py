"""Tagged union for rustdoc type trees and a defensive decoder."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Primitive:
    """A built-in type such as `u8` or `usize`."""

    name: str


@dataclass(frozen=True)
class ResolvedPath:
    """A path to a named type, with its generic type arguments."""

    path: str
    args: tuple["TypeNode", ...] = ()


@dataclass(frozen=True)
class GenericParam:
    """A generic parameter such as `T`."""

    name: str


@dataclass(frozen=True)
class TupleType:
    """A tuple type; an empty tuple is the unit type."""

    elements: tuple["TypeNode", ...] = ()


@dataclass(frozen=True)
class UnknownType:
    """Any type-tree shape the decoder does not recognize."""


TypeNode = Primitive | ResolvedPath | GenericParam | TupleType | UnknownType


def decode_type_node(raw: Any) -> TypeNode:
    """Decode a raw rustdoc type object, degrading to `UnknownType`."""
    if not isinstance(raw, dict):
        return UnknownType()

    primitive = raw.get("primitive")
    if isinstance(primitive, str):
        return Primitive(primitive)

    resolved = raw.get("resolved_path")
    if isinstance(resolved, dict):
        path = resolved.get("path")
        if not isinstance(path, str):
            return UnknownType()
        return ResolvedPath(path, _decode_generic_args(resolved.get("args")))

    generic = raw.get("generic")
    if isinstance(generic, str):
        return GenericParam(generic)

    elements = raw.get("tuple")
    if isinstance(elements, list):
        return TupleType(tuple(decode_type_node(e) for e in elements))

    return UnknownType()


def _decode_generic_args(raw_args: Any) -> tuple[TypeNode, ...]:
    """Keep only `{"type": ...}` arguments of an angle-bracketed list."""
    if not isinstance(raw_args, dict):
        return ()
    angle_bracketed = raw_args.get("angle_bracketed")
    if not isinstance(angle_bracketed, dict):
        return ()
    args = angle_bracketed.get("args")
    if not isinstance(args, list):
        return ()
    # Lifetimes and const arguments are not part of the rendered name.
    return tuple(
        decode_type_node(arg["type"])
        for arg in args
        if isinstance(arg, dict) and "type" in arg
    )
