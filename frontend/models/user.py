# frontend/models/user.py
from __future__ import annotations

from dataclasses import dataclass, field

from flask_login import UserMixin

from frontend.models._fields import to_bool, to_int


@dataclass
class User:
    id: int
    name: str
    email: str = ""
    phone_number: str = ""
    address: str = ""
    profile_picture: str = ""
    role: str = ""
    status: bool = True
    is_verified: bool = False
    created_at: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "User":
        roles = data.get("roles") or []
        role = data.get("role")
        if not role and roles:
            first = roles[0]
            role = first.get("name") if isinstance(first, dict) else first
        return cls(
            id=to_int(data.get("id")),
            name=data.get("name") or "",
            email=data.get("email") or "",
            phone_number=data.get("phone_number") or data.get("phone") or "",
            address=data.get("address") or "",
            profile_picture=data.get("profile_picture") or "",
            role=role or "",
            status=to_bool(data.get("status", True)),
            is_verified=to_bool(data.get("is_verified")),
            created_at=data.get("created_at") or "",
        )

    @property
    def status_label(self) -> str:
        return "Active" if self.status else "Blocked"


@dataclass
class UserDetail:
    user: User
    stats: dict = field(default_factory=dict)
    recent_orders: list[dict] = field(default_factory=list)
    recent_reviews: list[dict] = field(default_factory=list)
    liked_products: list[dict] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "UserDetail":
        return cls(
            user=User.from_api(data.get("user") or {}),
            stats=data.get("stats") or {},
            recent_orders=data.get("recent_orders") or [],
            recent_reviews=data.get("recent_reviews") or [],
            liked_products=data.get("liked_products") or [],
        )


class SessionUser(UserMixin):
    """Logged-in admin, rebuilt on every request from the signed session."""

    def __init__(self, profile: dict, token: str):
        self.profile = profile or {}
        self.token = token
        self.id = to_int(self.profile.get("id"))
        self.name = self.profile.get("name") or ""
        self.email = self.profile.get("email") or ""
        self.role = self.profile.get("role") or ""

    def get_id(self):
        return str(self.id)

    def has_role(self, role: str) -> bool:
        return (self.role or "").lower() == (role or "").lower()

    def __repr__(self):
        return f"<SessionUser {self.email} role={self.role}>"
