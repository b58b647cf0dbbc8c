# frontend/api/utils/media.py
from __future__ import annotations

from flask import current_app


def _join(base: str, path: str) -> str:
    return f"{base.rstrip('/')}/{path.lstrip('/')}" if base else f"/{path.lstrip('/')}"


def _clean(path) -> str:
    return str(path or "").strip().replace("\\", "/")


def image_url(path) -> str:
    """
    URL of a stored image as served by the API host.

    Absolute URLs pass through unchanged. Relative paths are served from
    "<API_URL>/storage/<path>" unless they already start with "storage/".
    """
    p = _clean(path)
    if not p:
        return ""
    if p.startswith(("http://", "https://", "//", "data:")):
        return p
    p = p.lstrip("/")
    if not p.startswith("storage/"):
        p = f"storage/{p}"
    return _join(current_app.config.get("API_URL") or "", p)


def public_image_url(path) -> str:
    """URL of a stored image under the public upload base (UPLOAD_BASE)."""
    p = _clean(path)
    if not p:
        return ""
    if p.startswith(("http://", "https://", "//", "data:")):
        return p
    p = p.lstrip("/")
    if p.startswith("storage/"):
        p = p[len("storage/"):]
    return _join(current_app.config.get("UPLOAD_BASE") or "", p)
