# frontend/user_loader.py
from flask import session

from frontend.extensions import login_manager
from frontend.models import SessionUser

SESSION_KEY = "auth_user"


@login_manager.user_loader
def load_user(user_id):
    stored = session.get(SESSION_KEY) or {}
    profile = stored.get("profile") or {}
    token = stored.get("token")
    if not token or str(profile.get("id")) != str(user_id):
        return None
    return SessionUser(profile, token)


def remember_user(profile: dict, token: str) -> SessionUser:
    session[SESSION_KEY] = {"profile": profile, "token": token}
    return SessionUser(profile, token)


def forget_user() -> None:
    session.pop(SESSION_KEY, None)
