"""Decoder for ``kubectl get -o json`` resource and event lists."""

import json
from typing import Any

from kubeopenmetrics.core.errors import DecodeError
from kubeopenmetrics.core.models import (
    InvolvedObject,
    ResourceCollection,
    ResourceRecord,
)


def _string_field(obj: dict[str, Any], key: str, where: str) -> str:
    """Return a string field of a JSON object, empty if absent or null."""
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"{where}.{key} must be a string")
    return value


def _decode_involved_object(value: Any, index: int) -> InvolvedObject | None:
    if value is None:
        return None
    where = f"items[{index}].involvedObject"
    if not isinstance(value, dict):
        raise DecodeError(f"{where} must be an object")
    return InvolvedObject(
        kind=_string_field(value, "kind", where),
        namespace=_string_field(value, "namespace", where),
        name=_string_field(value, "name", where),
    )


def _decode_record(item: Any, index: int) -> ResourceRecord:
    if not isinstance(item, dict):
        raise DecodeError(f"items[{index}] must be an object")
    return ResourceRecord(
        kind=_string_field(item, "kind", f"items[{index}]"),
        involved_object=_decode_involved_object(item.get("involvedObject"), index),
    )


def decode_collection(raw: str | bytes) -> ResourceCollection:
    """Decode a JSON resource or event list.

    Args:
        raw: JSON document shaped ``{"items": [...]}``. Bytes are read as UTF-8.

    Returns:
        ResourceCollection with one record per item, in document order.
        A null or empty ``items`` array gives an empty collection.

    Raises:
        DecodeError: If the input is not valid JSON or does not have the
            expected shape, or is nested deeper than the parser can follow.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError("input is not valid UTF-8") from e

    try:
        document = json.loads(raw)
    except ValueError as e:
        # JSONDecodeError, or an integer literal over the int conversion limit
        raise DecodeError(f"invalid JSON: {e}") from e
    except RecursionError as e:
        raise DecodeError("document nested too deeply") from e

    if not isinstance(document, dict):
        raise DecodeError("top-level value must be an object")
    if "items" not in document:
        raise DecodeError("missing 'items'")

    items = document["items"]
    if items is None:
        return ResourceCollection()
    if not isinstance(items, list):
        raise DecodeError("'items' must be an array")

    return ResourceCollection.of(
        _decode_record(item, index) for index, item in enumerate(items)
    )
