# frontend/api/products.py
from __future__ import annotations

from frontend.api.client import ApiResponse, as_dict, as_list
from frontend.extensions import api


def fetch_products() -> list[dict]:
    return as_list(api.get("/api/products"), "products")


def get_products_paginated(page: int = 1, per_page: int = 20, **filters) -> tuple[list[dict], dict]:
    payload = api.get(
        "/api/products-paginated",
        params={"page": page, "per_page": per_page, **filters},
    )
    return as_list(payload, "products"), as_dict(payload).get("pagination") or {}


def search_products(query: str, page: int = 1, limit: int = 20, **filters) -> tuple[list[dict], bool]:
    """Full-text search; filters: category_id, brand_id. Returns (products, has_more)."""
    if not (query or "").strip():
        return [], False
    payload = api.get(
        "/api/search-products",
        params={"q": query.strip(), "page": page, "limit": limit, **filters},
    )
    block = as_dict(payload).get("data")
    if isinstance(block, dict):
        pagination = block.get("pagination") or {}
        return as_list(block, "products"), bool(pagination.get("has_more"))
    return as_list(payload, "products"), False


def get_admin_products(page: int = 1, per_page: int = 20, **filters) -> tuple[list[dict], dict]:
    """
    Admin listing with aggregates (min_price, max_price, total_stock,
    variants_count). Filters: search, category_id.
    """
    payload = api.get(
        "/api/admin-products",
        params={"page": page, "per_page": per_page, **filters},
    )
    if isinstance(payload, list):
        return payload, {}
    payload = as_dict(payload)
    data = payload.get("data") or {}
    if isinstance(data, list):
        return data, payload.get("pagination") or {}
    data = as_dict(data)
    return as_list(data, "products"), data.get("pagination") or {}


def get_product_details(product_id) -> dict:
    """Admin view of one product (variants, item attributes, brand, category)."""
    payload = as_dict(api.get(f"/api/admin-product-details/{product_id}"))
    return payload.get("product") or {}


def get_product(product_id) -> dict:
    """Storefront view of one product (adds rating_summary)."""
    payload = as_dict(api.get(f"/api/get-product/{product_id}"))
    return payload.get("product") or {}


def create_product(data: dict) -> ApiResponse:
    return api.send("POST", "/api/create-product", key="product", json=data)


def update_product(product_id, data: dict) -> ApiResponse:
    return api.send("PUT", f"/api/update-product/{product_id}", key="product", json=data)


def delete_product(product_id) -> ApiResponse:
    return api.send("DELETE", f"/api/delete-product/{product_id}", key="product")


def delete_variant(variant_id) -> ApiResponse:
    return api.send("DELETE", f"/api/delete-variant/{variant_id}", key="variant")


def get_similar_products(product_id, page: int = 1, per_page: int = 8) -> tuple[list[dict], bool]:
    payload = api.get(
        f"/api/get-similar-products/{product_id}",
        params={"page": page, "per_page": per_page},
    )
    pagination = as_dict(payload).get("pagination") or {}
    return as_list(payload, "products"), bool(pagination.get("has_more"))
