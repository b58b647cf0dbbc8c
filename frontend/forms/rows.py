# frontend/forms/rows.py
"""
Add/remove buttons for the repeated sub-forms (details, features, variants,
options). The button posts ``action=<verb>:<indexes>`` and the view
re-renders the form with the edited data instead of saving it.
"""
from __future__ import annotations

import copy

BLANK_ROWS = {
    "details": {"key": "", "value": ""},
    "features": {"value": ""},
    "values": {"value": "", "description": "", "status": True},
    "attributes": {"attribute_id": "", "has_images": False, "is_primary": False},
}


def blank_variant(kind: str) -> dict:
    row = {"title": "", "attribute_value": "", "image_url": "", "image_json": []}
    if kind == "multi":
        row["options"] = [blank_option()]
    else:
        row.update(blank_option())
    return row


def blank_option() -> dict:
    return {
        "id": "",
        "title": "",
        "attribute_value": "",
        "sku": "",
        "mrp": "",
        "bp": "",
        "sp": "",
        "stock": "",
        "status": True,
        "image_url": "",
        "image_json": [],
    }


def _index(parts, pos):
    try:
        return int(parts[pos])
    except (IndexError, ValueError):
        return None


def apply_row_action(data: dict, action: str, kind: str = "") -> dict | None:
    """
    Return a copy of ``data`` with the row action applied, or None if the
    action is not a row action (i.e. the form should be saved).

        add:details            remove:details:2
        add:variants           remove:variants:0
        add:options:1          remove:options:1:0
    """
    if not action or ":" not in action:
        return None
    verb, *parts = action.split(":")
    if verb not in ("add", "remove") or not parts:
        return None

    data = copy.deepcopy(data)
    target = parts[0]

    if target == "options":
        vi = _index(parts, 1)
        variants = data.setdefault("variants", [])
        if vi is None or vi >= len(variants):
            return data
        options = variants[vi].setdefault("options", [])
        if verb == "add":
            options.append(blank_option())
        else:
            oi = _index(parts, 2)
            if oi is not None and oi < len(options):
                options.pop(oi)
        return data

    rows = data.get(target)
    if not isinstance(rows, list):
        rows = []
    if verb == "add":
        blank = blank_variant(kind) if target == "variants" else BLANK_ROWS.get(target)
        if blank is None:
            return data
        rows.append(copy.deepcopy(blank))
    else:
        i = _index(parts, 1)
        if i is not None and i < len(rows):
            rows.pop(i)
    data[target] = rows
    return data
