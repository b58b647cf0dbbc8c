# frontend/admin/product_routes.py
from flask import abort, current_app, flash, redirect, render_template, request, url_for

from frontend.admin import admin_bp
from frontend.admin.category_routes import load_product_category
from frontend.admin.helpers import api_failed, flash_result, page_arg
from frontend.api import brands as brands_api
from frontend.api import images as images_api
from frontend.api import products as products_api
from frontend.api.client import ApiError
from frontend.auth.decorators import admin_required
from frontend.forms import unflatten_form, validate_form
from frontend.forms.product import (
    MultiVariantProductForm,
    SingleAttributeProductForm,
    SingleVariantProductForm,
    inject_image_flags,
)
from frontend.forms.rows import blank_variant, apply_row_action
from frontend.models import Brand, Pagination, Product
from frontend.services.variant_matrix import (
    MULTI_VARIANT,
    SINGLE_ATTRIBUTE,
    SINGLE_VARIANT,
    attribute_flags,
    product_form_data,
    product_form_kind,
    product_payload,
)

FORMS = {
    SINGLE_VARIANT: SingleVariantProductForm,
    SINGLE_ATTRIBUTE: SingleAttributeProductForm,
    MULTI_VARIANT: MultiVariantProductForm,
}


def _load_brands() -> list:
    try:
        return [Brand.from_api(b) for b in brands_api.fetch_brands()]
    except ApiError:
        api_failed("Failed to load brands")
        return []


def _image_choices() -> list:
    # only feeds the picker suggestions; the form works without it
    try:
        return images_api.get_images("products")
    except ApiError:
        current_app.logger.warning("Could not list product images", exc_info=True)
        return []


def _load_product(product_id) -> Product:
    try:
        raw = products_api.get_product_details(product_id)
    except ApiError as e:
        if e.not_found:
            abort(404)
        raise
    if not raw:
        abort(404)
    return Product.from_api(raw)


def _initial_data(category_id, kind) -> dict:
    data = {"category_id": category_id, "status": True, "details": [], "features": []}
    if kind != SINGLE_VARIANT:
        data["variants"] = [blank_variant(kind)]
    return data


# --- Create / edit -------------------------------------------------------------

def _product_form(category_id, product_id=None):
    try:
        category = load_product_category(category_id)
        product = _load_product(product_id) if product_id else None
    except ApiError:
        api_failed("Failed to load product form")
        return redirect(url_for("admin.category_products", category_id=category_id))

    kind = product_form_kind(category)
    has_images_1, has_images_2 = attribute_flags(category)

    def render(data, errors=None, form_error=None):
        return render_template(
            f"admin/products/form_{kind}.html",
            category=category,
            kind=kind,
            product_id=product_id,
            brands=_load_brands(),
            images=_image_choices(),
            has_images_1=has_images_1,
            has_images_2=has_images_2,
            data=data,
            errors=errors or {},
            form_error=form_error,
        )

    if request.method == "GET":
        if product is not None:
            return render(product_form_data(product, kind))
        return render(_initial_data(category_id, kind))

    data = unflatten_form(request.form)
    data["category_id"] = category_id

    edited = apply_row_action(data, request.form.get("action", ""), kind)
    if edited is not None:
        return render(edited)

    form, errors = validate_form(FORMS[kind], inject_image_flags(data, has_images_1, has_images_2))
    if form is None:
        return render(data, errors=errors)

    payload = product_payload(kind, form, updating=product_id is not None)
    try:
        if product_id:
            resp = products_api.update_product(product_id, payload)
        else:
            resp = products_api.create_product(payload)
    except ApiError:
        api_failed("Failed to update product" if product_id else "Failed to create product")
        return render(data)

    if not resp.success:
        return render(data, form_error=resp.error_text())
    flash(resp.message or "Success!", "success")
    return redirect(url_for("admin.category_products", category_id=category_id))


@admin_bp.route("/categories/<int:category_id>/products/new", methods=["GET", "POST"])
@admin_required
def create_product(category_id):
    return _product_form(category_id)


@admin_bp.route("/categories/<int:category_id>/products/<int:product_id>/edit", methods=["GET", "POST"])
@admin_required
def edit_product(category_id, product_id):
    return _product_form(category_id, product_id)


@admin_bp.route("/products/<int:product_id>/delete", methods=["POST"])
@admin_required
def delete_product(product_id):
    category_id = request.form.get("category_id", type=int)
    try:
        resp = products_api.delete_product(product_id)
    except ApiError:
        api_failed("Failed to delete product")
    else:
        flash_result(resp, "Product deleted successfully!")
    if category_id:
        return redirect(url_for("admin.category_products", category_id=category_id))
    return redirect(url_for("admin.list_products"))


# --- Listing / detail ----------------------------------------------------------

@admin_bp.route("/products", endpoint="list_products")
@admin_required
def product_list():
    page = page_arg()
    per_page = current_app.config["ADMIN_PAGE_SIZE"]
    search = (request.args.get("search") or "").strip()
    try:
        rows, pagination = products_api.get_admin_products(page, per_page, search=search)
    except ApiError:
        api_failed("Failed to load products")
        rows, pagination = [], {}

    products = [Product.from_api(p) for p in rows]
    delete_id = request.args.get("delete", type=int)
    return render_template(
        "admin/products/list.html",
        products=products,
        pagination=Pagination.from_api(pagination, page, per_page),
        search=search,
        to_delete=next((p for p in products if p.id == delete_id), None),
    )


@admin_bp.route("/products/<int:product_id>")
@admin_required
def product_detail(product_id):
    try:
        product = _load_product(product_id)
    except ApiError:
        api_failed("Failed to load product")
        return redirect(url_for("admin.list_products"))

    variant_id = request.args.get("delete_variant", type=int)
    return render_template(
        "admin/products/detail.html",
        product=product,
        variant_to_delete=product.variant(variant_id) if variant_id else None,
    )


@admin_bp.route("/products/<int:product_id>/variants/<int:variant_id>/delete", methods=["POST"])
@admin_required
def delete_variant(product_id, variant_id):
    try:
        resp = products_api.delete_variant(variant_id)
    except ApiError:
        api_failed("Failed to delete variant")
    else:
        flash_result(resp, "Variant deleted successfully!")
    return redirect(url_for("admin.product_detail", product_id=product_id))
