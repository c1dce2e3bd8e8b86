"""Helpers for picking records out of vRA collection responses."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Sequence

from errors import KeyLookupError


def collection_content(body: Any) -> List[Any]:
    """Return the ``content`` list of a collection response.

    A body without a ``content`` list (or one that is not an object at all) is
    read as an empty collection.
    """

    if not isinstance(body, dict):
        return []
    content = body.get("content")
    if not isinstance(content, list):
        return []
    return list(content)


def find_index_by_key(records: Sequence[Any], key: Any, field: str = "name") -> int:
    """Index of the first record whose ``field`` equals ``key``."""

    for index, record in enumerate(records):
        if isinstance(record, dict) and field in record and record[field] == key:
            return index
    raise KeyLookupError(key, field=field)


def get_object_from_key(records: Sequence[Any], key: Any, field: str = "name") -> Dict[str, Any]:
    """Return a copy of the first record whose ``field`` equals ``key``.

    The copy is detached from ``records``; use :func:`find_index_by_key` to
    update the source sequence in place.
    """

    return copy.deepcopy(records[find_index_by_key(records, key, field)])
