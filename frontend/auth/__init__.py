# frontend/auth/__init__.py

# Package-level auth_bp is the same object the login routes are attached to
from . import login_routes as _login

auth_bp = _login.auth_bp

# Importing attaches the view functions to auth_bp
from . import password_reset_routes  # noqa: F401,E402
