"""Logic for decoding a rustdoc JSON export into an item index."""

import json
import logging

from quarry.errors import MalformedInputError
from quarry.item_record import ItemRecord

logger = logging.getLogger(__name__)

DocumentIndex = dict[str, ItemRecord]


def build_document_index(raw_text: str) -> DocumentIndex:
    """Decode rustdoc JSON text into a map of item id to `ItemRecord`.

    Entries that are not JSON objects are skipped. A document that is not
    JSON, or whose top-level `index` is missing or not an object, raises
    `MalformedInputError`.
    """
    try:
        doc = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        msg = f"rustdoc export is not valid JSON: {exc}"
        raise MalformedInputError(msg) from exc

    if not isinstance(doc, dict):
        msg = "rustdoc export must be a JSON object"
        raise MalformedInputError(msg)
    raw_index = doc.get("index")
    if not isinstance(raw_index, dict):
        msg = "rustdoc export has no 'index' object"
        raise MalformedInputError(msg)

    index: DocumentIndex = {}
    for item_id, raw_item in raw_index.items():
        if isinstance(raw_item, dict):
            index[str(item_id)] = ItemRecord.from_raw(raw_item)
    logger.debug("Decoded %d of %d index entries", len(index), len(raw_index))
    return index
