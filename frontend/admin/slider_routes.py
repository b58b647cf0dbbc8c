# frontend/admin/slider_routes.py
from dataclasses import asdict

from flask import abort, flash, redirect, render_template, request, url_for

from frontend.admin import admin_bp
from frontend.admin.helpers import api_failed, flash_result, modal_state
from frontend.api import sliders as sliders_api
from frontend.api.client import ApiError
from frontend.auth.decorators import admin_required
from frontend.forms import unflatten_form, validate_form
from frontend.forms.slider import SliderForm
from frontend.models import Slider


def _load_sliders() -> list:
    try:
        return [Slider.from_api(s) for s in sliders_api.fetch_sliders()]
    except ApiError:
        api_failed("Failed to load sliders")
        return []


def _render(sliders, modal=None, selected=None, data=None, errors=None, form_error=None):
    if modal is None and data is None:
        modal, selected = modal_state(sliders)
    if data is None:
        data = asdict(selected) if (modal == "edit" and selected) else {"status": True, "open_in_new_tab": False}
    return render_template(
        "admin/sliders/list.html",
        sliders=sliders,
        modal=modal,
        selected=selected,
        data=data,
        errors=errors or {},
        form_error=form_error,
    )


def _render_edit(slider_id, data, errors=None, form_error=None):
    sliders = _load_sliders()
    selected = next((s for s in sliders if s.id == slider_id), None)
    return _render(sliders, modal="edit", selected=selected, data=data, errors=errors, form_error=form_error)


@admin_bp.route("/sliders")
@admin_required
def list_sliders():
    return _render(_load_sliders())


@admin_bp.route("/sliders/create", methods=["POST"])
@admin_required
def create_slider():
    data = unflatten_form(request.form)
    form, errors = validate_form(SliderForm, data)
    if form is None:
        return _render(_load_sliders(), modal="create", data=data, errors=errors)

    try:
        resp = sliders_api.create_slider(form.payload())
    except ApiError:
        api_failed("Failed to create slider")
        return _render(_load_sliders(), modal="create", data=data)

    if not resp.success:
        return _render(_load_sliders(), modal="create", data=data, form_error=resp.error_text())
    flash_result(resp, "Slider created successfully!")
    return redirect(url_for("admin.list_sliders"))


@admin_bp.route("/sliders/<int:slider_id>/update", methods=["POST"])
@admin_required
def update_slider(slider_id):
    data = unflatten_form(request.form)
    form, errors = validate_form(SliderForm, data)
    if form is None:
        return _render_edit(slider_id, data, errors=errors)

    try:
        resp = sliders_api.update_slider(slider_id, form.payload())
    except ApiError:
        api_failed("Failed to update slider")
        return _render_edit(slider_id, data)

    if not resp.success:
        return _render_edit(slider_id, data, form_error=resp.error_text())
    flash_result(resp, "Slider updated successfully!")
    return redirect(url_for("admin.list_sliders"))


@admin_bp.route("/sliders/<int:slider_id>/delete", methods=["POST"])
@admin_required
def delete_slider(slider_id):
    try:
        resp = sliders_api.delete_slider(slider_id)
    except ApiError:
        api_failed("Failed to delete slider")
    else:
        flash_result(resp, "Slider deleted successfully!")
    return redirect(url_for("admin.list_sliders"))


@admin_bp.route("/sliders/<int:slider_id>/move", methods=["POST"])
@admin_required
def move_slider(slider_id):
    """Swap a slider with its neighbour and save the whole order."""
    step = {"up": -1, "down": 1}.get(request.form.get("direction"))
    if step is None:
        abort(400)

    ids = [s.id for s in _load_sliders()]
    if slider_id not in ids:
        flash("The selected record no longer exists.", "warning")
        return redirect(url_for("admin.list_sliders"))

    index = ids.index(slider_id)
    target = index + step
    if not 0 <= target < len(ids):
        return redirect(url_for("admin.list_sliders"))
    ids[index], ids[target] = ids[target], ids[index]

    try:
        resp = sliders_api.update_slider_order(ids)
    except ApiError:
        api_failed("Failed to update slider order. Please try again.")
    else:
        flash_result(resp, "Slider order updated successfully!")
    return redirect(url_for("admin.list_sliders"))
