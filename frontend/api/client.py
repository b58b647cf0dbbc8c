# frontend/api/client.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests
from flask import current_app, has_request_context
from flask_login import current_user

log = logging.getLogger(__name__)


class ApiError(Exception):
    """The catalog backend was unreachable or answered with an error status."""

    def __init__(self, message: str, status: int | None = None, errors=None, payload=None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.errors = errors or []
        self.payload = payload

    @property
    def not_found(self) -> bool:
        return self.status == 404


@dataclass
class ApiResponse:
    """Backend envelope normalized to {success, message, result, errors}."""

    success: bool
    message: str = ""
    result: Any = None
    errors: Any = field(default_factory=list)

    def error_text(self, default: str = "An error occurred.") -> str:
        joined = " ".join(_flatten_errors(self.errors))
        return joined or self.message or default

    def unwrap(self):
        if not self.success:
            raise ApiError(self.error_text(), errors=self.errors)
        return self.result


def _flatten_errors(errors):
    if not errors:
        return
    if isinstance(errors, str):
        yield errors
        return
    if isinstance(errors, dict):
        errors = errors.values()
    for item in errors:
        if isinstance(item, (list, tuple, dict)):
            yield from _flatten_errors(item)
        elif item:
            yield str(item)


def is_success(payload) -> bool:
    # The backend mixes three dialects: res="success", success=true, isSuccess=true
    if not isinstance(payload, dict):
        return False
    if "res" in payload:
        return payload.get("res") == "success"
    return bool(payload.get("success") or payload.get("isSuccess"))


def normalize(payload, key: str = "result") -> ApiResponse:
    if not isinstance(payload, dict):
        return ApiResponse(success=False, message="Unexpected response from server.")
    return ApiResponse(
        success=is_success(payload),
        message=payload.get("message") or "",
        result=payload.get(key),
        errors=payload.get("errors") or [],
    )


def as_list(payload, *keys) -> list:
    """Return a list body as-is, or the first list found under `keys` (then "data")."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in (*keys, "data"):
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return []


def as_dict(payload) -> dict:
    """The body when it is a JSON object, otherwise an empty dict."""
    return payload if isinstance(payload, dict) else {}


def _json_or_none(resp):
    try:
        return resp.json()
    except ValueError:
        return None


class ApiClient:
    """Thin wrapper over a `requests.Session` bound to the configured API_URL."""

    def __init__(self, app=None):
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.extensions["catalog_api"] = self

    @staticmethod
    def url(path: str) -> str:
        base = current_app.config.get("API_URL") or ""
        return f"{base}/{path.lstrip('/')}"

    @staticmethod
    def _auth_headers() -> dict:
        if has_request_context() and current_user and current_user.is_authenticated:
            token = getattr(current_user, "token", None)
            if token:
                return {"Authorization": f"Bearer {token}"}
        return {}

    def request(self, method: str, path: str, **kwargs):
        headers = {**self._auth_headers(), **(kwargs.pop("headers", None) or {})}
        kwargs.setdefault("timeout", current_app.config.get("API_TIMEOUT", 15))

        try:
            resp = self.session.request(method, self.url(path), headers=headers, **kwargs)
        except requests.RequestException as e:
            log.warning("%s %s failed: %s", method, path, e)
            raise ApiError(f"Backend unreachable: {e}") from e

        log.debug("%s %s -> %s", method, path, resp.status_code)
        payload = _json_or_none(resp)

        if resp.status_code >= 400:
            body = payload if isinstance(payload, dict) else {}
            raise ApiError(
                body.get("message") or f"Backend answered HTTP {resp.status_code}",
                status=resp.status_code,
                errors=body.get("errors"),
                payload=payload,
            )
        return payload

    def get(self, path: str, params: dict | None = None):
        if params:
            params = {k: v for k, v in params.items() if v not in (None, "")}
        return self.request("GET", path, params=params or None)

    def post(self, path: str, json=None, data=None, files=None):
        return self.request("POST", path, json=json, data=data, files=files)

    def put(self, path: str, json=None):
        return self.request("PUT", path, json=json)

    def delete(self, path: str, json=None):
        return self.request("DELETE", path, json=json)

    def send(self, method: str, path: str, key: str = "result", **kwargs) -> ApiResponse:
        """
        Mutation helper: returns the normalized envelope. A 4xx answer that
        carries a JSON body (validation errors, "not allowed") becomes an
        unsuccessful ApiResponse so its messages can be shown on the form.
        Transport failures and 5xx still raise ApiError.
        """
        try:
            payload = self.request(method, path, **kwargs)
        except ApiError as e:
            if isinstance(e.payload, dict) and e.status is not None and e.status < 500:
                resp = normalize(e.payload, key)
                resp.success = False
                return resp
            raise
        return normalize(payload, key)
