# frontend/extensions.py
from __future__ import annotations

from flask_login import LoginManager

from frontend.api.client import ApiClient

# Keep extension instances in one place to avoid circular imports
login_manager = LoginManager()
api = ApiClient()


def _clean_base_url(url: str | None) -> str:
    """Return the URL without surrounding spaces and trailing slashes."""
    return (url or "").strip().rstrip("/")


def init_api(app):
    """
    Initialize the catalog API client with a bit of config sanitization so
    that every wrapper can simply join "<API_URL>/api/...".
    """
    cfg = app.config

    # 1) base URLs
    for key in ("API_URL", "UPLOAD_BASE"):
        value = _clean_base_url(cfg.get(key))
        if not value:
            app.logger.warning("%s was not set -> media and API links will be relative.", key)
        elif "://" not in value:
            value = f"http://{value}"
            app.logger.warning("%s had no scheme -> assuming %s", key, value)
        cfg[key] = value

    # 2) timeout
    try:
        timeout = float(cfg.get("API_TIMEOUT"))
        if timeout <= 0:
            raise ValueError
    except (TypeError, ValueError):
        timeout = 15.0
        app.logger.info("API_TIMEOUT was invalid -> setting %s s.", timeout)
    cfg["API_TIMEOUT"] = timeout

    # 3) final log
    app.logger.info(
        "API cfg -> url=%s uploads=%s timeout=%s",
        cfg.get("API_URL"),
        cfg.get("UPLOAD_BASE"),
        cfg.get("API_TIMEOUT"),
    )

    api.init_app(app)
