# frontend/api/sliders.py
from __future__ import annotations

from frontend.api.client import ApiResponse, as_list
from frontend.extensions import api


def fetch_sliders() -> list[dict]:
    """All sliders, already sorted by `order` on the backend."""
    return as_list(api.get("/api/sliders"), "sliders")


def create_slider(data: dict) -> ApiResponse:
    return api.send("POST", "/api/create-sliders", key="slider", json=data)


def update_slider(slider_id, data: dict) -> ApiResponse:
    return api.send("PUT", f"/api/update-sliders/{slider_id}", key="slider", json=data)


def delete_slider(slider_id) -> ApiResponse:
    return api.send("DELETE", f"/api/delete-sliders/{slider_id}", key="slider")


def update_slider_order(slider_ids: list[int]) -> ApiResponse:
    # position in the list becomes order 1..n
    return api.send("POST", "/api/order", json={"order": list(slider_ids)})
