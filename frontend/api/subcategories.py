# frontend/api/subcategories.py
from __future__ import annotations

from frontend.api.client import ApiResponse, as_dict, as_list
from frontend.extensions import api


def get_subcategories(parent_id, search: str = "", limit: int | None = None) -> dict:
    """
    Returns {"parent": {...}, "subcategories": [...], "total": int}.
    """
    raw = api.get(
        "/api/subcategories",
        params={"parent_id": parent_id, "search": search, "limit": limit},
    )
    payload = as_dict(raw)
    subcategories = as_list(raw, "subcategories")
    return {
        "parent": payload.get("parent_category") or {},
        "subcategories": subcategories,
        "total": payload.get("total", len(subcategories)),
    }


def create_subcategory(data: dict) -> ApiResponse:
    return api.send("POST", "/api/create-subcategory", key="subcategory", json=data)


def update_subcategory(subcategory_id, data: dict) -> ApiResponse:
    return api.send("PUT", f"/api/update-subcategory/{subcategory_id}", key="subcategory", json=data)


def delete_subcategory(subcategory_id) -> ApiResponse:
    return api.send("DELETE", f"/api/delete-subcategory/{subcategory_id}", key="subcategory")
