"""Utilities for working with action request templates returned by the vRA catalog API."""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional


def fill_template_data(template: Any, data: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return a copy of an action template with ``data`` merged into its ``data`` map.

    The `/actions/{actionId}/requests/template` endpoint returns a
    ``CatalogResourceRequest`` prototype whose ``data`` key holds the form
    fields of the action.  Callers only supply the fields they care about, so
    the values are layered over whatever defaults the template already carries.
    The template passed in is left untouched.
    """

    if not isinstance(template, dict):
        raise ValueError("action template must be a JSON object")

    filled = copy.deepcopy(template)
    current = filled.get("data")
    merged: Dict[str, Any] = dict(current) if isinstance(current, dict) else {}
    if data:
        merged.update(data)
    filled["data"] = merged
    return filled
