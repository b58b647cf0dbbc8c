# frontend/api/images.py
from __future__ import annotations

from frontend.api.client import ApiResponse, as_list
from frontend.extensions import api


def get_images(directory: str) -> list:
    return as_list(api.get(f"/api/images/get-files/{directory}"), "files", "images")


def upload_image(content: bytes, filename: str, directory: str, content_type: str = "image/jpeg") -> ApiResponse:
    """Multipart upload; on success `result` is the stored relative path."""
    return api.send(
        "POST",
        "/api/images/upload",
        data={"directory": directory},
        files={"image": (filename, content, content_type)},
    )


def delete_image(path: str) -> ApiResponse:
    return api.send("DELETE", "/api/images", json={"path": path})
