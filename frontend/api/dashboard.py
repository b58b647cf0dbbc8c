# frontend/api/dashboard.py
from __future__ import annotations

from frontend.api.client import normalize
from frontend.extensions import api


def get_dashboard_statistics() -> dict:
    return normalize(api.get("/api/admin/dashboard/statistics"), key="data").unwrap() or {}
