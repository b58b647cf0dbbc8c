# frontend/auth/decorators.py
from functools import wraps

from flask import current_app, redirect, url_for
from flask_login import current_user


def admin_required(view):
    """Login required, and the signed-in account must carry ADMIN_ROLE."""

    @wraps(view)
    def wrapped(*args, **kwargs):
        if not current_user.is_authenticated:
            return current_app.login_manager.unauthorized()
        if not current_user.has_role(current_app.config["ADMIN_ROLE"]):
            return redirect(url_for("auth.unauthorized"))
        return view(*args, **kwargs)

    return wrapped
