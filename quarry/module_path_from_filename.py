"""Logic for deriving canonical module paths from rustdoc source spans."""

import logging

from quarry.models import PATH_SEPARATOR

logger = logging.getLogger(__name__)

# Crate roots in priority order, with the token marking their source tree.
CRATE_ROOTS: tuple[tuple[str, str], ...] = (
    ("std", "std/src/"),
    ("alloc", "alloc/src/"),
    ("core", "core/src/"),
)

MODULE_FILE_MARKERS = frozenset({"mod.rs", "lib.rs"})
SOURCE_SUFFIX = ".rs"

# Internal layouts re-exported from a single public module.
NAMESPACE_COLLAPSES: dict[str, dict[tuple[str, ...], tuple[str, ...]]] = {
    "std": {
        ("collections", "hash", "map"): ("collections",),
        ("collections", "hash", "set"): ("collections",),
        ("collections", "btree", "map"): ("collections",),
        ("collections", "btree", "set"): ("collections",),
        ("collections", "linked_list"): ("collections",),
        ("collections", "vec_deque"): ("collections",),
        ("collections", "binary_heap"): ("collections",),
    },
}

# Module families whose submodules are all exposed at the family level.
COLLAPSED_FAMILIES: dict[str, frozenset[str]] = {
    "std": frozenset({"collections"}),
}


def process_path_parts(path_after_src: str) -> list[str]:
    """Turn `collections/hash_map.rs` into `["collections", "hash_map"]`.

    `mod.rs` and `lib.rs` contribute no component.
    """
    parts = []
    for part in path_after_src.split("/"):
        if not part or part in MODULE_FILE_MARKERS:
            continue
        parts.append(part.removesuffix(SOURCE_SUFFIX))
    return parts


def module_path_from_filename(filename: str) -> str | None:
    """Map a span filename such as `alloc/src/vec/mod.rs` to `alloc::vec`.

    Returns None when the file is not under a recognized crate root.
    """
    for root, token in CRATE_ROOTS:
        pos = filename.find(token)
        if pos == -1:
            continue

        parts = process_path_parts(filename[pos + len(token) :])
        if not parts:
            return root
        module_path = PATH_SEPARATOR.join((root, *_collapse(root, parts)))
        logger.debug("Module path for %s: %s", filename, module_path)
        return module_path

    logger.debug("No crate root found in filename: %s", filename)
    return None


def _collapse(root: str, parts: list[str]) -> list[str]:
    key = tuple(parts)
    exact = NAMESPACE_COLLAPSES.get(root, {})
    if key in exact:
        return list(exact[key])
    if len(parts) >= 2 and parts[0] in COLLAPSED_FAMILIES.get(root, frozenset()):
        return [parts[0]]
    return parts
