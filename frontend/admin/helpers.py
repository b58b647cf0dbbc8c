# frontend/admin/helpers.py
from __future__ import annotations

from flask import current_app, flash, request

from frontend.api.client import ApiResponse


def page_arg() -> int:
    return max(request.args.get("page", 1, type=int) or 1, 1)


def api_failed(message: str) -> None:
    """Log the active exception and show a generic message."""
    current_app.logger.exception(message)
    flash(message, "danger")


def modal_state(items, key=lambda item: item.id):
    """
    Which modal a list page opens, from the query string:
    ?modal=create, ?edit=<id>, ?delete=<id>. Returns (modal, selected item).
    """
    if request.args.get("modal") == "create":
        return "create", None
    for mode in ("edit", "delete"):
        wanted = request.args.get(mode, type=int)
        if wanted is None:
            continue
        for item in items:
            if key(item) == wanted:
                return mode, item
        flash("The selected record no longer exists.", "warning")
    return None, None


def flash_result(resp: ApiResponse, success: str) -> bool:
    if resp.success:
        flash(resp.message or success, "success")
        return True
    flash(resp.error_text(), "danger")
    return False
