# frontend/auth/login_routes.py
# Admin sign-in / sign-out against the catalog API
from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_user, logout_user

from frontend.api import auth as auth_api
from frontend.api.client import ApiError
from frontend.forms import unflatten_form, validate_form
from frontend.forms.auth import LoginForm
from frontend.user_loader import forget_user, remember_user

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


def _is_admin(profile: dict) -> bool:
    return (profile.get("role") or "").lower() == current_app.config["ADMIN_ROLE"].lower()


# ─── Login ─────────────────────────────────────────────────────────────────────
@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    """
    Show the login form and exchange credentials for an API token.
    Only accounts with the admin role may enter the dashboard.
    """
    if current_user.is_authenticated:
        return redirect(url_for("admin.dashboard"))

    data, errors = {}, {}
    if request.method == "POST":
        data = unflatten_form(request.form)
        form, errors = validate_form(LoginForm, data)
        if form is not None:
            try:
                result = auth_api.login(form.email, form.password)
            except ApiError as e:
                if e.status in (401, 403, 422):
                    # wrong password, blocked account, unverified e-mail
                    flash(e.message or "Invalid credentials.", "danger")
                else:
                    current_app.logger.exception("Login request failed")
                    flash("Login failed. Please try again later.", "danger")
            else:
                profile, token = result["user"], result["token"]
                if not token or not _is_admin(profile):
                    current_app.logger.info("Non-admin login refused for %s", form.email)
                    return redirect(url_for("auth.unauthorized"))
                login_user(remember_user(profile, token))
                flash(result["message"] or "Logged in successfully.", "success")
                next_url = request.args.get("next") or ""
                if not next_url.startswith("/") or next_url.startswith("//"):
                    next_url = url_for("admin.dashboard")
                return redirect(next_url)

    return render_template("auth/login.html", data=data, errors=errors)


# ─── Logout ────────────────────────────────────────────────────────────────────
@auth_bp.route("/logout", methods=["GET", "POST"])
def logout():
    if current_user.is_authenticated:
        try:
            auth_api.logout()
        except ApiError:
            # the local session is cleared either way
            current_app.logger.warning("Logout call to the API failed", exc_info=True)
    logout_user()
    forget_user()
    flash("You have been logged out.", "info")
    return redirect(url_for("auth.login"))


@auth_bp.route("/unauthorized")
def unauthorized():
    return render_template("auth/unauthorized.html"), 403
