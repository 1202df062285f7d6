"""Logic for resolving struct field ids against the item index."""

import logging
from collections.abc import Iterable

from quarry.build_document_index import DocumentIndex
from quarry.item_record import FieldLike
from quarry.models import FieldInfo
from quarry.render_type_name import UNKNOWN_TYPE_NAME, render_type_name

logger = logging.getLogger(__name__)

UNKNOWN_FIELD_NAME = "unknown"


def resolve_fields(
    field_ids: Iterable[int], index: DocumentIndex, owner_path: str
) -> list[FieldInfo]:
    """Resolve field ids in declaration order.

    Ids missing from the index are skipped; a field without a name or a
    type tree gets the `"unknown"` placeholder instead.
    """
    fields: list[FieldInfo] = []
    for field_id in field_ids:
        record = index.get(str(field_id))
        if record is None:
            logger.debug("Field id %s of %s not in index", field_id, owner_path)
            continue

        if isinstance(record.kind, FieldLike):
            type_name = render_type_name(record.kind.type_node)
        else:
            type_name = UNKNOWN_TYPE_NAME

        fields.append(
            FieldInfo(
                name=record.name if record.name is not None else UNKNOWN_FIELD_NAME,
                type_name=type_name,
                is_public=record.is_public,
                owner_path=owner_path,
            )
        )
    return fields
