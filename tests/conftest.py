import io
from dataclasses import dataclass, field

import pytest
from PIL import Image

from frontend.app import create_app
from frontend.config import TestingConfig
from frontend.extensions import api

API_BASE = TestingConfig.API_URL

ADMIN_PROFILE = {"id": 1, "name": "Ada Admin", "email": "ada@example.test", "role": "Admin"}
CUSTOMER_PROFILE = {"id": 2, "name": "Carl Customer", "email": "carl@example.test", "role": "User"}


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


@dataclass
class Call:
    method: str
    path: str
    kwargs: dict = field(default_factory=dict)

    @property
    def json(self):
        return self.kwargs.get("json")

    @property
    def params(self):
        return self.kwargs.get("params") or {}

    @property
    def headers(self):
        return self.kwargs.get("headers") or {}


class FakeSession:
    """
    Stands in for the client's requests.Session. Responses are registered per
    (method, path); anything unregistered answers 404 like a missing route.
    """

    def __init__(self):
        self.headers = {}
        self.routes = {}
        self.calls = []

    def add(self, method, path, payload=None, status=200):
        self.routes[(method.upper(), path)] = FakeResponse(status, payload)

    def fail(self, method, path, exc):
        self.routes[(method.upper(), path)] = exc

    def request(self, method, url, **kwargs):
        path = url[len(API_BASE):] if url.startswith(API_BASE) else url
        self.calls.append(Call(method.upper(), path, kwargs))
        answer = self.routes.get((method.upper(), path))
        if isinstance(answer, Exception):
            raise answer
        if answer is None:
            return FakeResponse(404, {"res": "error", "message": "Not found"})
        return answer

    def find(self, method, path):
        return [c for c in self.calls if c.method == method.upper() and c.path == path]

    def last(self, method, path):
        found = self.find(method, path)
        assert found, f"no {method} {path} call; calls were {[(c.method, c.path) for c in self.calls]}"
        return found[-1]


@pytest.fixture
def fake_api(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(api, "session", session)
    return session


@pytest.fixture
def app(fake_api):
    app = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, profile, token="tok-123"):
    with client.session_transaction() as sess:
        sess["_user_id"] = str(profile["id"])
        sess["_fresh"] = True
        sess["auth_user"] = {"profile": profile, "token": token}
    return client


@pytest.fixture
def admin_client(client):
    return _login(client, ADMIN_PROFILE)


@pytest.fixture
def customer_client(client):
    return _login(client, CUSTOMER_PROFILE)


def png_bytes(size=(400, 200), color=(200, 30, 30), mode="RGB", fmt="PNG"):
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


def category_payload(attributes=()):
    """Category as returned by get-category-for-product."""
    return {
        "id": 5,
        "name": "T-shirts",
        "parent_id": 1,
        "status": 1,
        "attributes": list(attributes),
    }


COLOR = {
    "id": 1,
    "name": "Color",
    "pivot": {"has_images": 1, "is_primary": 1},
    "values": [
        {"id": 11, "value": "Red", "attribute_id": 1},
        {"id": 12, "value": "Blue", "attribute_id": 1},
    ],
}

SIZE = {
    "id": 2,
    "name": "Size",
    "pivot": {"has_images": 0, "is_primary": 0},
    "values": [
        {"id": 21, "value": "S", "attribute_id": 2},
        {"id": 22, "value": "M", "attribute_id": 2},
        {"id": 23, "value": "L", "attribute_id": 2},
    ],
}
