# frontend/app.py
import logging

# Show INFO logs even outside the werkzeug access log
logging.basicConfig(level=logging.INFO)

from flask import Flask, render_template
from werkzeug.exceptions import NotFound

from frontend.config import Config

# Extensions
from frontend.extensions import login_manager, init_api
from frontend.api.utils.media import image_url, public_image_url
from frontend.api.utils.rich_text import plain_text, rich_text

# Blueprints
from frontend.admin import admin_bp
from frontend.auth import auth_bp
from frontend.client import client_bp
from frontend import user_loader as _user_loader  # noqa: F401


def _money(value) -> str:
    try:
        return f"{float(value):,.2f}"
    except (TypeError, ValueError):
        return ""


def create_app(config_object=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Init extensions
    login_manager.init_app(app)
    login_manager.login_view = "auth.login"
    login_manager.login_message_category = "warning"
    init_api(app)

    if app.config.get("API_DEBUG"):
        logging.getLogger("frontend.api").setLevel(logging.DEBUG)

    app.jinja_env.filters["rich_text"] = rich_text
    app.jinja_env.filters["plain_text"] = plain_text
    app.jinja_env.filters["media_url"] = image_url
    app.jinja_env.filters["public_media_url"] = public_image_url
    app.jinja_env.filters["money"] = _money

    # Register blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(client_bp)

    @app.errorhandler(NotFound)
    def not_found(_e):
        return render_template("errors/404.html"), 404

    # Diagnostics: list all routes
    @app.get("/__routes")
    def __routes():
        lines = []
        for r in sorted(app.url_map.iter_rules(), key=lambda x: x.rule):
            methods = ",".join(sorted(m for m in r.methods if m in {"GET", "POST"}))
            lines.append(f"{r.rule:45s} -> {r.endpoint} [{methods}]")
        return "<pre>" + "\n".join(lines) + "</pre>"

    return app


# For gunicorn
app = create_app()


if __name__ == "__main__":
    app.run(debug=True)
