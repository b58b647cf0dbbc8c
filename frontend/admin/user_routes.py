# frontend/admin/user_routes.py
from flask import abort, current_app, redirect, render_template, request, url_for

from frontend.admin import admin_bp
from frontend.admin.helpers import api_failed, flash_result, page_arg
from frontend.api import users as users_api
from frontend.api.client import ApiError
from frontend.auth.decorators import admin_required
from frontend.models import Pagination, User, UserDetail

STATUS_FILTERS = ("", "active", "blocked")


@admin_bp.route("/users")
@admin_required
def list_users():
    page = page_arg()
    per_page = current_app.config["USERS_PAGE_SIZE"]
    search = (request.args.get("search") or "").strip()
    status = request.args.get("status") or ""
    if status not in STATUS_FILTERS:
        status = ""

    try:
        rows, pagination = users_api.get_all_users(
            page=page,
            per_page=per_page,
            search=search,
            status=status,
            sort_by="created_at",
            sort_order="desc",
        )
    except ApiError:
        api_failed("Failed to load users")
        rows, pagination = [], {}

    try:
        statistics = users_api.get_user_statistics()
    except ApiError:
        current_app.logger.warning("User statistics unavailable", exc_info=True)
        statistics = {}

    users = [User.from_api(u) for u in rows]
    toggle_id = request.args.get("toggle", type=int)
    return render_template(
        "admin/users/list.html",
        users=users,
        statistics=statistics,
        pagination=Pagination.from_api(pagination, page, per_page),
        search=search,
        status=status,
        to_toggle=next((u for u in users if u.id == toggle_id), None),
    )


@admin_bp.route("/users/<int:user_id>")
@admin_required
def user_detail(user_id):
    try:
        raw = users_api.get_user_details(user_id)
    except ApiError as e:
        if e.not_found:
            abort(404)
        api_failed("Failed to load user")
        return redirect(url_for("admin.list_users"))
    if not raw["user"]:
        abort(404)
    return render_template("admin/users/detail.html", detail=UserDetail.from_api(raw))


@admin_bp.route("/users/<int:user_id>/toggle-status", methods=["POST"])
@admin_required
def toggle_user_status(user_id):
    try:
        resp = users_api.toggle_user_status(user_id)
    except ApiError:
        api_failed("Failed to update user status")
    else:
        flash_result(resp, "User status updated")

    # keep the list where the admin was
    back = {k: v for k, v in request.form.items() if k in ("page", "search", "status") and v}
    if request.form.get("from") == "detail":
        return redirect(url_for("admin.user_detail", user_id=user_id))
    return redirect(url_for("admin.list_users", **back))
