# frontend/forms/unflatten.py
import re

_KEY = re.compile(r"([^\[\]]+)|\[([^\[\]]*)\]")


def _parts(key: str):
    parts = []
    for m in _KEY.finditer(key):
        token = m.group(1) if m.group(1) is not None else m.group(2)
        if token == "":
            parts.append("[]")
        elif token.isdigit():
            parts.append(int(token))
        else:
            parts.append(token)
    return parts


def _to_lists(node):
    # dicts keyed only by ints become lists ordered by index
    if isinstance(node, dict):
        node = {k: _to_lists(v) for k, v in node.items()}
        if node and all(isinstance(k, int) for k in node):
            return [node[k] for k in sorted(node)]
        return node
    if isinstance(node, list):
        return [_to_lists(v) for v in node]
    return node


def unflatten_form(form) -> dict:
    """
    Turn a werkzeug MultiDict with bracketed names into nested data.

        variants[0][options][1][sku]=A1  -> {"variants": [{"options": [.., {"sku": "A1"}]}]}
        image_json[]=a.jpg&image_json[]=b.jpg -> {"image_json": ["a.jpg", "b.jpg"]}

    For repeated plain keys the last value wins, so a hidden "0" followed by
    a checked checkbox "1" reads as "1".
    """
    root: dict = {}
    for key in form.keys():
        values = form.getlist(key)
        parts = _parts(key)
        if not parts:
            continue
        if parts[-1] == "[]":
            parts = parts[:-1]
            value = [v for v in values if v.strip()]
        else:
            value = values[-1] if values else ""

        node = root
        for part in parts[:-1]:
            node = node.setdefault(part, {}) if part != "[]" else None
            if not isinstance(node, dict):
                break
        else:
            node[parts[-1]] = value
    return _to_lists(root)
