# frontend/api/categories.py
from __future__ import annotations

from frontend.api.client import ApiResponse, as_list, normalize
from frontend.extensions import api


def get_categories() -> list[dict]:
    """Top-level categories, each with its `children` subcategories."""
    return as_list(api.get("/api/categories"), "categories")


def get_category(category_id) -> ApiResponse:
    return normalize(api.get(f"/api/get-category/{category_id}"))


def get_category_for_product(category_id) -> ApiResponse:
    """Category with its attributes (pivot has_images / is_primary) and values."""
    return normalize(api.get(f"/api/get-category-for-product/{category_id}"))


def create_category(data: dict) -> ApiResponse:
    return api.send("POST", "/api/create-categories", key="category", json=data)


def update_category(category_id, data: dict) -> ApiResponse:
    return api.send("PUT", f"/api/update-category/{category_id}", key="category", json=data)


def delete_category(category_id) -> ApiResponse:
    return api.send("DELETE", f"/api/delete-category/{category_id}", key="category")
