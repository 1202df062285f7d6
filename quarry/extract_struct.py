"""Logic for recognizing struct items and building their descriptors."""

import logging

from quarry.build_document_index import DocumentIndex
from quarry.item_record import ItemRecord, StructLike
from quarry.models import PATH_SEPARATOR, Shape, StructInfo
from quarry.module_path_from_filename import module_path_from_filename
from quarry.resolve_fields import resolve_fields

logger = logging.getLogger(__name__)

UNRESOLVED_BARE_NAME = "bare_name"
UNRESOLVED_SKIP = "skip"
UNRESOLVED_POLICIES = frozenset({UNRESOLVED_BARE_NAME, UNRESOLVED_SKIP})

SHAPES_BY_TAG: dict[str, Shape] = {
    "plain": Shape.NAMED,
    "tuple": Shape.TUPLE,
    "unit": Shape.UNIT,
}


def full_path_for_item(
    record: ItemRecord, unresolved: str = UNRESOLVED_BARE_NAME
) -> str | None:
    """Build `module::path::Name` from the item's span filename.

    Without a recognizable crate root the bare name is used, or None when
    `unresolved` is "skip".
    """
    name = record.name or ""
    module_path = None
    if record.source_location:
        module_path = module_path_from_filename(record.source_location)
    if module_path:
        return f"{module_path}{PATH_SEPARATOR}{name}"

    if unresolved == UNRESOLVED_SKIP:
        logger.debug("Skipping %s: no module path for %s", name, record.source_location)
        return None
    logger.debug("Using bare name for %s", name)
    return name


def extract_struct(
    record: ItemRecord,
    index: DocumentIndex,
    unresolved: str = UNRESOLVED_BARE_NAME,
) -> StructInfo | None:
    """Return the StructInfo for a struct item, or None for anything else."""
    if not isinstance(record.kind, StructLike) or not record.name:
        return None

    full_path = full_path_for_item(record, unresolved)
    if full_path is None:
        return None

    tag = record.kind.shape_tag
    shape = SHAPES_BY_TAG.get(tag or "")
    if shape is None:
        logger.debug("Unknown struct kind %r for %s", tag, full_path)
        return StructInfo.from_path(full_path)
    if shape is Shape.UNIT:
        return StructInfo.from_path(full_path, Shape.UNIT)

    fields = resolve_fields(record.kind.field_ids, index, full_path)
    logger.debug("Found %d fields for struct %s", len(fields), full_path)
    return StructInfo.from_path(full_path, shape, tuple(fields))


def extract_structs(
    index: DocumentIndex, unresolved: str = UNRESOLVED_BARE_NAME
) -> dict[str, StructInfo]:
    """Extract every struct in the index, keyed by full path.

    A later item with the same full path replaces the earlier one.
    """
    structs: dict[str, StructInfo] = {}
    for record in index.values():
        info = extract_struct(record, index, unresolved)
        if info is None:
            continue
        if info.full_path in structs:
            logger.debug("Replacing duplicate struct %s", info.full_path)
        structs[info.full_path] = info
    logger.debug("Extracted %d structs from %d items", len(structs), len(index))
    return structs
