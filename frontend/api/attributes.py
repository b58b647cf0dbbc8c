# frontend/api/attributes.py
from __future__ import annotations

from frontend.api.client import ApiResponse, as_list
from frontend.extensions import api


# --- Attributes ---------------------------------------------------------------

def fetch_attributes() -> list[dict]:
    return as_list(api.get("/api/attributes"), "attributes")


def create_attribute(data: dict) -> ApiResponse:
    return api.send("POST", "/api/create-attribute", key="attribute", json=data)


def update_attribute(attribute_id, data: dict) -> ApiResponse:
    return api.send("PUT", f"/api/update-attribute/{attribute_id}", key="attribute", json=data)


def delete_attribute(attribute_id) -> ApiResponse:
    return api.send("DELETE", f"/api/delete-attribute/{attribute_id}", key="attribute")


# --- Attribute values ---------------------------------------------------------

def fetch_attribute_values(attribute_id) -> tuple[dict, list[dict]]:
    payload = api.get("/api/attribute-values", params={"attribute_id": attribute_id}) or {}
    if isinstance(payload, list):
        return {}, payload
    return payload.get("attribute") or {}, as_list(payload, "values")


def create_attribute_value(attribute_id, values: list[dict]) -> ApiResponse:
    """The backend accepts a batch: {attribute_id, attributeValues: [...]}."""
    return api.send(
        "POST",
        "/api/create-attribute-value",
        key="values",
        json={"attribute_id": attribute_id, "attributeValues": values},
    )


def update_attribute_value(value_id, data: dict) -> ApiResponse:
    return api.send("PUT", f"/api/update-attribute-value/{value_id}", key="value", json=data)


def delete_attribute_value(value_id) -> ApiResponse:
    return api.send("DELETE", f"/api/delete-attribute-value/{value_id}", key="value")
