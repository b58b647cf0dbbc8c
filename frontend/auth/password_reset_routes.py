# frontend/auth/password_reset_routes.py
from flask import current_app, flash, redirect, render_template, request, url_for

from frontend.api import auth as auth_api
from frontend.api.client import ApiError
from frontend.auth.login_routes import auth_bp
from frontend.forms import unflatten_form, validate_form
from frontend.forms.auth import ForgotPasswordForm, ResetPasswordForm


@auth_bp.route("/forgot-password", methods=["GET", "POST"])
def forgot_password():
    """Ask the API to e-mail a reset code."""
    data, errors = {}, {}
    if request.method == "POST":
        data = unflatten_form(request.form)
        form, errors = validate_form(ForgotPasswordForm, data)
        if form is not None:
            try:
                resp = auth_api.forgot_password(form.email)
            except ApiError:
                current_app.logger.exception("Forgot-password request failed")
                flash("Failed to send the reset code.", "danger")
            else:
                if resp.success:
                    flash(resp.message or "Password reset code sent to your email", "success")
                    return redirect(url_for("auth.reset_password", email=form.email))
                flash(resp.error_text(), "danger")
    return render_template("auth/forgot_password.html", data=data, errors=errors)


@auth_bp.route("/reset-password", methods=["GET", "POST"])
def reset_password():
    data, errors = {"email": request.args.get("email", "")}, {}
    if request.method == "POST":
        data = unflatten_form(request.form)
        form, errors = validate_form(ResetPasswordForm, data)
        if form is not None:
            try:
                resp = auth_api.reset_password(
                    form.email, form.code, form.password, form.password_confirmation
                )
            except ApiError:
                current_app.logger.exception("Reset-password request failed")
                flash("Failed to reset the password.", "danger")
            else:
                if resp.success:
                    flash(resp.message or "Password reset successful", "success")
                    return redirect(url_for("auth.login"))
                flash(resp.error_text(), "danger")
    # never echo passwords back into the form
    data.pop("password", None)
    data.pop("password_confirmation", None)
    return render_template("auth/reset_password.html", data=data, errors=errors)
