# frontend/api/users.py
from __future__ import annotations

from frontend.api.client import ApiResponse, as_dict, as_list
from frontend.extensions import api


def get_all_users(
    page: int = 1,
    per_page: int = 15,
    search: str = "",
    status: str = "",
    sort_by: str = "created_at",
    sort_order: str = "desc",
) -> tuple[list[dict], dict]:
    payload = api.get(
        "/api/admin/users",
        params={
            "page": page,
            "per_page": per_page,
            "search": search,
            "status": status,
            "sort_by": sort_by,
            "sort_order": sort_order,
        },
    )
    if isinstance(payload, list):
        return payload, {}
    block = as_dict(payload).get("users") or {}
    if isinstance(block, list):
        return block, {}
    block = as_dict(block)
    pagination = {k: block.get(k) for k in ("current_page", "last_page", "per_page", "total", "from", "to")}
    return as_list(block), pagination


def get_user_details(user_id) -> dict:
    """{user, stats, recent_orders, recent_reviews, liked_products}"""
    payload = as_dict(api.get(f"/api/admin/users/{user_id}"))
    return {
        "user": payload.get("user") or {},
        "stats": payload.get("stats") or {},
        "recent_orders": payload.get("recent_orders") or [],
        "recent_reviews": payload.get("recent_reviews") or [],
        "liked_products": payload.get("liked_products") or [],
    }


def toggle_user_status(user_id) -> ApiResponse:
    return api.send("POST", f"/api/admin/users/{user_id}/toggle-status", key="user")


def get_user_statistics() -> dict:
    payload = as_dict(api.get("/api/admin/users/statistics"))
    return payload.get("data") or payload.get("statistics") or {}
