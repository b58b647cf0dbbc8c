# frontend/api/brands.py
from __future__ import annotations

from frontend.api.client import ApiResponse, as_dict, as_list
from frontend.extensions import api


def fetch_brands() -> list[dict]:
    return as_list(api.get("/api/brands"), "brands")


def get_brand(brand_id) -> dict:
    payload = as_dict(api.get(f"/api/brands/{brand_id}"))
    return payload.get("brand", payload)


def get_brand_products(brand_id, page: int = 1, per_page: int = 8) -> tuple[list[dict], bool]:
    payload = api.get(
        f"/api/brands/{brand_id}/products",
        params={"page": page, "per_page": per_page},
    )
    return as_list(payload, "products"), bool(as_dict(payload).get("has_more"))


def create_brand(data: dict) -> ApiResponse:
    return api.send("POST", "/api/create-brand", key="brand", json=data)


def update_brand(brand_id, data: dict) -> ApiResponse:
    return api.send("PUT", f"/api/update-brand/{brand_id}", key="brand", json=data)


def delete_brand(brand_id) -> ApiResponse:
    return api.send("DELETE", f"/api/delete-brand/{brand_id}", key="brand")
