# frontend/admin/brand_routes.py
from dataclasses import asdict

from flask import redirect, render_template, request, url_for

from frontend.admin import admin_bp
from frontend.admin.helpers import api_failed, flash_result, modal_state
from frontend.api import brands as brands_api
from frontend.api.client import ApiError
from frontend.auth.decorators import admin_required
from frontend.forms import unflatten_form, validate_form
from frontend.forms.brand import BrandForm
from frontend.models import Brand


def _load_brands() -> list:
    try:
        return [Brand.from_api(b) for b in brands_api.fetch_brands()]
    except ApiError:
        api_failed("Failed to load brands")
        return []


def _render(brands, modal=None, selected=None, data=None, errors=None, form_error=None):
    if modal is None and data is None:
        modal, selected = modal_state(brands)
    if data is None:
        data = asdict(selected) if (modal == "edit" and selected) else {"status": True}
    return render_template(
        "admin/brands/list.html",
        brands=brands,
        modal=modal,
        selected=selected,
        data=data,
        errors=errors or {},
        form_error=form_error,
    )


def _render_edit(brand_id, data, errors=None, form_error=None):
    brands = _load_brands()
    selected = next((b for b in brands if b.id == brand_id), None)
    return _render(brands, modal="edit", selected=selected, data=data, errors=errors, form_error=form_error)


@admin_bp.route("/brands")
@admin_required
def list_brands():
    return _render(_load_brands())


@admin_bp.route("/brands/create", methods=["POST"])
@admin_required
def create_brand():
    data = unflatten_form(request.form)
    form, errors = validate_form(BrandForm, data)
    if form is None:
        return _render(_load_brands(), modal="create", data=data, errors=errors)

    try:
        resp = brands_api.create_brand(form.payload())
    except ApiError:
        api_failed("Failed to create brand")
        return _render(_load_brands(), modal="create", data=data)

    if not resp.success:
        return _render(_load_brands(), modal="create", data=data, form_error=resp.error_text())
    flash_result(resp, "Brand created successfully!")
    return redirect(url_for("admin.list_brands"))


@admin_bp.route("/brands/<int:brand_id>/update", methods=["POST"])
@admin_required
def update_brand(brand_id):
    data = unflatten_form(request.form)
    form, errors = validate_form(BrandForm, data)
    if form is None:
        return _render_edit(brand_id, data, errors=errors)

    try:
        resp = brands_api.update_brand(brand_id, form.payload())
    except ApiError:
        api_failed("Failed to update brand")
        return _render_edit(brand_id, data)

    if not resp.success:
        return _render_edit(brand_id, data, form_error=resp.error_text())
    flash_result(resp, "Brand updated successfully!")
    return redirect(url_for("admin.list_brands"))


@admin_bp.route("/brands/<int:brand_id>/delete", methods=["POST"])
@admin_required
def delete_brand(brand_id):
    try:
        resp = brands_api.delete_brand(brand_id)
    except ApiError:
        api_failed("Failed to delete brand")
    else:
        flash_result(resp, "Brand deleted successfully!")
    return redirect(url_for("admin.list_brands"))
