# frontend/admin/category_routes.py
from dataclasses import asdict

from flask import abort, current_app, flash, redirect, render_template, request, url_for

from frontend.admin import admin_bp
from frontend.admin.helpers import api_failed, flash_result, modal_state, page_arg
from frontend.api import attributes as attributes_api
from frontend.api import categories as categories_api
from frontend.api import images as images_api
from frontend.api import products as products_api
from frontend.api import subcategories as subcategories_api
from frontend.api.client import ApiError
from frontend.auth.decorators import admin_required
from frontend.forms import unflatten_form, validate_form
from frontend.forms.category import CategoryForm, SubcategoryForm
from frontend.forms.rows import apply_row_action
from frontend.forms.rules import check_upload
from frontend.models import Attribute, Category, Pagination, Product
from frontend.services.variant_matrix import product_form_kind

IMAGE_FIELDS = (("image", "Image"), ("secondary_image", "Secondary image"))


# --- Helpers -------------------------------------------------------------------

def _category_data(category: Category) -> dict:
    data = asdict(category)
    data.pop("children", None)
    data["attributes"] = [
        {"attribute_id": a.id, "has_images": a.has_images, "is_primary": a.is_primary}
        for a in category.attributes
    ]
    return data


def _check_uploads() -> dict:
    errors = {}
    for field, label in IMAGE_FIELDS:
        message = check_upload(
            request.files.get(f"{field}_file"),
            current_app.config["MAX_IMAGE_BYTES"],
            current_app.config["SUPPORTED_IMAGE_TYPES"],
            label=label,
        )
        if message:
            errors[field] = message
    return errors


def _store_uploads(form) -> None:
    """Upload chosen files to the categories directory and keep the stored paths."""
    for field, _label in IMAGE_FIELDS:
        upload = request.files.get(f"{field}_file")
        if upload is None or not upload.filename:
            continue
        resp = images_api.upload_image(upload.read(), upload.filename, "categories", upload.mimetype)
        if not resp.success:
            raise ApiError(resp.error_text("Image upload failed"))
        setattr(form, field, resp.result)


# --- Categories ----------------------------------------------------------------

def _load_categories() -> list:
    try:
        return [Category.from_api(c) for c in categories_api.get_categories()]
    except ApiError:
        api_failed("Failed to load categories")
        return []


def _render_categories(categories, modal=None, selected=None, data=None, errors=None, form_error=None):
    if modal is None and data is None:
        modal, selected = modal_state(categories)
    if data is None:
        data = _category_data(selected) if (modal == "edit" and selected) else {"status": True}
    return render_template(
        "admin/categories/list.html",
        categories=categories,
        modal=modal,
        selected=selected,
        data=data,
        errors=errors or {},
        form_error=form_error,
    )


@admin_bp.route("/categories")
@admin_required
def list_categories():
    return _render_categories(_load_categories())


def _save_category(category_id=None):
    modal = "edit" if category_id else "create"
    data = unflatten_form(request.form)
    form, errors = validate_form(CategoryForm, data)
    errors = {**errors, **_check_uploads()}

    def again(**kw):
        categories = _load_categories()
        selected = next((c for c in categories if c.id == category_id), None)
        return _render_categories(categories, modal=modal, selected=selected, data=data, **kw)

    if errors:
        return again(errors=errors)

    try:
        _store_uploads(form)
        if category_id:
            resp = categories_api.update_category(category_id, form.payload())
        else:
            resp = categories_api.create_category(form.payload())
    except ApiError:
        api_failed("Failed to update category" if category_id else "Failed to create category")
        return again()

    if not resp.success:
        return again(form_error=resp.error_text())
    flash_result(resp, "Category updated successfully!" if category_id else "Category created successfully!")
    return redirect(url_for("admin.list_categories"))


@admin_bp.route("/categories/create", methods=["POST"])
@admin_required
def create_category():
    return _save_category()


@admin_bp.route("/categories/<int:category_id>/update", methods=["POST"])
@admin_required
def update_category(category_id):
    return _save_category(category_id)


@admin_bp.route("/categories/<int:category_id>/delete", methods=["POST"])
@admin_required
def delete_category(category_id):
    parent_id = request.form.get("parent_id", type=int)
    try:
        resp = categories_api.delete_category(category_id)
    except ApiError:
        api_failed("Failed to delete category")
    else:
        flash_result(resp, "Category deleted successfully!")
    if parent_id:
        return redirect(url_for("admin.list_subcategories", parent_id=parent_id))
    return redirect(url_for("admin.list_categories"))


# --- Subcategories -------------------------------------------------------------

def _load_subcategories(parent_id, search=""):
    try:
        block = subcategories_api.get_subcategories(parent_id, search=search)
    except ApiError as e:
        if e.not_found:
            abort(404)
        api_failed("Failed to load subcategories")
        return None, []
    parent = Category.from_api(block["parent"]) if block["parent"] else None
    return parent, [Category.from_api(c) for c in block["subcategories"]]


def _load_attributes() -> list:
    try:
        return [Attribute.from_api(a) for a in attributes_api.fetch_attributes()]
    except ApiError:
        api_failed("Failed to load attributes")
        return []


def _render_subcategories(parent_id, modal=None, selected=None, data=None, errors=None, form_error=None):
    search = (request.args.get("search") or "").strip()
    parent, subcategories = _load_subcategories(parent_id, search)
    if selected is None and modal == "edit":
        selected = next((c for c in subcategories if c.id == request.view_args.get("category_id")), None)
    if modal is None and data is None:
        modal, selected = modal_state(subcategories)
    if data is None:
        data = _category_data(selected) if (modal == "edit" and selected) else {"status": True, "attributes": []}
    data["parent_id"] = parent_id
    return render_template(
        "admin/categories/subcategories.html",
        parent=parent,
        parent_id=parent_id,
        subcategories=subcategories,
        attributes=_load_attributes() if modal in ("create", "edit") else [],
        search=search,
        modal=modal,
        selected=selected,
        data=data,
        errors=errors or {},
        form_error=form_error,
    )


@admin_bp.route("/categories/<int:parent_id>/subcategories")
@admin_required
def list_subcategories(parent_id):
    return _render_subcategories(parent_id)


def _save_subcategory(parent_id, category_id=None):
    modal = "edit" if category_id else "create"
    data = unflatten_form(request.form)
    data["parent_id"] = parent_id

    edited = apply_row_action(data, request.form.get("action", ""))
    if edited is not None:
        return _render_subcategories(parent_id, modal=modal, data=edited)

    form, errors = validate_form(SubcategoryForm, data)
    errors = {**errors, **_check_uploads()}
    if errors:
        return _render_subcategories(parent_id, modal=modal, data=data, errors=errors)

    try:
        _store_uploads(form)
        if category_id:
            resp = subcategories_api.update_subcategory(category_id, form.payload())
        else:
            resp = subcategories_api.create_subcategory(form.payload())
    except ApiError:
        api_failed("Failed to update subcategory" if category_id else "Failed to create subcategory")
        return _render_subcategories(parent_id, modal=modal, data=data)

    if not resp.success:
        return _render_subcategories(parent_id, modal=modal, data=data, form_error=resp.error_text())
    flash_result(resp, "Subcategory updated successfully!" if category_id else "Subcategory created successfully!")
    return redirect(url_for("admin.list_subcategories", parent_id=parent_id))


@admin_bp.route("/categories/<int:parent_id>/subcategories/create", methods=["POST"])
@admin_required
def create_subcategory(parent_id):
    return _save_subcategory(parent_id)


@admin_bp.route("/categories/<int:parent_id>/subcategories/<int:category_id>/update", methods=["POST"])
@admin_required
def update_subcategory(parent_id, category_id):
    return _save_subcategory(parent_id, category_id)


@admin_bp.route("/categories/<int:parent_id>/subcategories/<int:category_id>/delete", methods=["POST"])
@admin_required
def delete_subcategory(parent_id, category_id):
    try:
        resp = subcategories_api.delete_subcategory(category_id)
    except ApiError:
        api_failed("Failed to delete subcategory")
    else:
        flash_result(resp, "Subcategory deleted successfully!")
    return redirect(url_for("admin.list_subcategories", parent_id=parent_id))


# --- Products of one category --------------------------------------------------

def load_product_category(category_id) -> Category:
    """Category with attributes and values, as needed by the product forms."""
    try:
        resp = categories_api.get_category_for_product(category_id)
    except ApiError as e:
        if e.not_found:
            abort(404)
        raise
    if not resp.success or not resp.result:
        abort(404)
    return Category.from_api(resp.result)


@admin_bp.route("/categories/<int:category_id>/products")
@admin_required
def category_products(category_id):
    page = page_arg()
    per_page = current_app.config["ADMIN_PAGE_SIZE"]
    search = (request.args.get("search") or "").strip()
    try:
        category = load_product_category(category_id)
        rows, pagination = products_api.get_admin_products(
            page, per_page, category_id=category_id, search=search
        )
    except ApiError:
        api_failed("Failed to load products")
        return redirect(url_for("admin.list_categories"))

    products = [Product.from_api(p) for p in rows]
    delete_id = request.args.get("delete", type=int)
    to_delete = next((p for p in products if p.id == delete_id), None)
    if delete_id and to_delete is None:
        flash("The selected record no longer exists.", "warning")
    return render_template(
        "admin/products/category_products.html",
        category=category,
        kind=product_form_kind(category),
        products=products,
        pagination=Pagination.from_api(pagination, page, per_page),
        search=search,
        to_delete=to_delete,
    )
