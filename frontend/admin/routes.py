# frontend/admin/routes.py
from flask import current_app, render_template

from frontend.admin import admin_bp
from frontend.api.client import ApiError
from frontend.api.dashboard import get_dashboard_statistics
from frontend.auth.decorators import admin_required


@admin_bp.route("/")
@admin_required
def dashboard():
    try:
        stats = get_dashboard_statistics()
    except ApiError:
        current_app.logger.exception("Dashboard statistics unavailable")
        stats = None
    return render_template("admin/dashboard.html", stats=stats)
