# frontend/api/auth.py
from __future__ import annotations

from frontend.api.client import ApiError, ApiResponse, as_dict
from frontend.extensions import api


def login(email: str, password: str) -> dict:
    """
    Returns {"token", "user", "message"}; a rejected login raises ApiError
    carrying the backend's message (wrong password, blocked, unverified).
    """
    payload = as_dict(api.post("/api/login", json={"email": email, "password": password}))
    return {
        "token": payload.get("token"),
        "user": payload.get("user") or {},
        "message": payload.get("message") or "",
    }


def logout() -> None:
    api.post("/api/logout")


def _message_call(path: str, body: dict) -> ApiResponse:
    # These endpoints answer {message} only: 2xx means done, 4xx carries the reason
    try:
        payload = as_dict(api.post(path, json=body))
    except ApiError as e:
        if e.status is not None and e.status < 500:
            return ApiResponse(success=False, message=e.message, errors=e.errors)
        raise
    return ApiResponse(success=True, message=payload.get("message") or "")


def forgot_password(email: str) -> ApiResponse:
    return _message_call("/api/forgot-password", {"email": email})


def reset_password(email: str, code: str, password: str, password_confirmation: str) -> ApiResponse:
    return _message_call(
        "/api/reset-password",
        {
            "email": email,
            "code": code,
            "password": password,
            "password_confirmation": password_confirmation,
        },
    )
