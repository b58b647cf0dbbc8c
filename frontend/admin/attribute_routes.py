# frontend/admin/attribute_routes.py
from dataclasses import asdict

from flask import abort, redirect, render_template, request, url_for

from frontend.admin import admin_bp
from frontend.admin.helpers import api_failed, flash_result, modal_state
from frontend.api import attributes as attributes_api
from frontend.api.client import ApiError
from frontend.auth.decorators import admin_required
from frontend.forms import unflatten_form, validate_form
from frontend.forms.attribute import AttributeForm, AttributeValueBatchForm, AttributeValueForm
from frontend.forms.rows import BLANK_ROWS, apply_row_action
from frontend.models import Attribute, AttributeValue


# --- Attributes ----------------------------------------------------------------

def _load_attributes() -> list:
    try:
        return [Attribute.from_api(a) for a in attributes_api.fetch_attributes()]
    except ApiError:
        api_failed("Failed to load attributes")
        return []


def _render_attributes(attributes, modal=None, selected=None, data=None, errors=None, form_error=None):
    if modal is None and data is None:
        modal, selected = modal_state(attributes)
    if data is None:
        data = asdict(selected) if (modal == "edit" and selected) else {"status": True}
    return render_template(
        "admin/attributes/list.html",
        attributes=attributes,
        modal=modal,
        selected=selected,
        data=data,
        errors=errors or {},
        form_error=form_error,
    )


@admin_bp.route("/attributes")
@admin_required
def list_attributes():
    return _render_attributes(_load_attributes())


def _save_attribute(attribute_id=None):
    modal = "edit" if attribute_id else "create"
    data = unflatten_form(request.form)
    form, errors = validate_form(AttributeForm, data)

    def again(**kw):
        attributes = _load_attributes()
        selected = next((a for a in attributes if a.id == attribute_id), None)
        return _render_attributes(attributes, modal=modal, selected=selected, data=data, **kw)

    if form is None:
        return again(errors=errors)
    try:
        if attribute_id:
            resp = attributes_api.update_attribute(attribute_id, form.model_dump())
        else:
            resp = attributes_api.create_attribute(form.model_dump())
    except ApiError:
        api_failed("Failed to update attribute" if attribute_id else "Failed to create attribute")
        return again()

    if not resp.success:
        return again(form_error=resp.error_text())
    flash_result(resp, "Attribute updated successfully!" if attribute_id else "Attribute created successfully!")
    return redirect(url_for("admin.list_attributes"))


@admin_bp.route("/attributes/create", methods=["POST"])
@admin_required
def create_attribute():
    return _save_attribute()


@admin_bp.route("/attributes/<int:attribute_id>/update", methods=["POST"])
@admin_required
def update_attribute(attribute_id):
    return _save_attribute(attribute_id)


@admin_bp.route("/attributes/<int:attribute_id>/delete", methods=["POST"])
@admin_required
def delete_attribute(attribute_id):
    try:
        resp = attributes_api.delete_attribute(attribute_id)
    except ApiError:
        api_failed("Failed to delete attribute")
    else:
        flash_result(resp, "Attribute deleted successfully!")
    return redirect(url_for("admin.list_attributes"))


# --- Attribute values ----------------------------------------------------------

def _load_values(attribute_id):
    try:
        attribute, values = attributes_api.fetch_attribute_values(attribute_id)
    except ApiError as e:
        if e.not_found:
            abort(404)
        api_failed("Failed to load attribute values")
        return None, []
    return (
        Attribute.from_api(attribute) if attribute else None,
        [AttributeValue.from_api(v) for v in values],
    )


def _render_values(attribute_id, modal=None, selected=None, data=None, errors=None, form_error=None):
    attribute, values = _load_values(attribute_id)
    if modal == "edit" and selected is None:
        wanted = request.view_args.get("value_id")
        selected = next((v for v in values if v.id == wanted), None)
    if modal is None and data is None:
        modal, selected = modal_state(values)
    if data is None:
        if modal == "edit" and selected:
            data = asdict(selected)
        else:
            data = {"values": [dict(BLANK_ROWS["values"])]}
    return render_template(
        "admin/attributes/values.html",
        attribute=attribute,
        attribute_id=attribute_id,
        values=values,
        modal=modal,
        selected=selected,
        data=data,
        errors=errors or {},
        form_error=form_error,
    )


@admin_bp.route("/attributes/<int:attribute_id>/values")
@admin_required
def list_attribute_values(attribute_id):
    return _render_values(attribute_id)


@admin_bp.route("/attributes/<int:attribute_id>/values/create", methods=["POST"])
@admin_required
def create_attribute_values(attribute_id):
    data = unflatten_form(request.form)
    edited = apply_row_action(data, request.form.get("action", ""))
    if edited is not None:
        return _render_values(attribute_id, modal="create", data=edited)

    form, errors = validate_form(AttributeValueBatchForm, data)
    if form is None:
        return _render_values(attribute_id, modal="create", data=data, errors=errors)
    try:
        resp = attributes_api.create_attribute_value(attribute_id, form.payload())
    except ApiError:
        api_failed("Failed to create attribute values")
        return _render_values(attribute_id, modal="create", data=data)

    if not resp.success:
        return _render_values(attribute_id, modal="create", data=data, form_error=resp.error_text())
    flash_result(resp, "Attribute values created successfully!")
    return redirect(url_for("admin.list_attribute_values", attribute_id=attribute_id))


@admin_bp.route("/attributes/<int:attribute_id>/values/<int:value_id>/update", methods=["POST"])
@admin_required
def update_attribute_value(attribute_id, value_id):
    data = unflatten_form(request.form)
    form, errors = validate_form(AttributeValueForm, data)
    if form is None:
        return _render_values(attribute_id, modal="edit", data=data, errors=errors)
    try:
        resp = attributes_api.update_attribute_value(
            value_id, {**form.model_dump(), "attribute_id": attribute_id}
        )
    except ApiError:
        api_failed("Failed to update attribute value")
        return _render_values(attribute_id, modal="edit", data=data)

    if not resp.success:
        return _render_values(attribute_id, modal="edit", data=data, form_error=resp.error_text())
    flash_result(resp, "Attribute value updated successfully!")
    return redirect(url_for("admin.list_attribute_values", attribute_id=attribute_id))


@admin_bp.route("/attributes/<int:attribute_id>/values/<int:value_id>/delete", methods=["POST"])
@admin_required
def delete_attribute_value(attribute_id, value_id):
    try:
        resp = attributes_api.delete_attribute_value(value_id)
    except ApiError:
        api_failed("Failed to delete attribute value")
    else:
        flash_result(resp, "Attribute value deleted successfully!")
    return redirect(url_for("admin.list_attribute_values", attribute_id=attribute_id))
