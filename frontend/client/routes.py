# frontend/client/routes.py
from __future__ import annotations

from flask import Blueprint, abort, current_app, render_template, request

from frontend.api import brands as brands_api
from frontend.api import categories as categories_api
from frontend.api import products as products_api
from frontend.api import sliders as sliders_api
from frontend.api import subcategories as subcategories_api
from frontend.api.client import ApiError
from frontend.models import Brand, Category, Pagination, Product, Slider

client_bp = Blueprint("client", __name__)

# --- Helpers --------------------------------------------------------------------

def _page() -> int:
    return max(request.args.get("page", 1, type=int) or 1, 1)


def _unavailable(what: str) -> None:
    # storefront pages degrade to empty sections instead of flashing errors
    current_app.logger.exception("Storefront: failed to load %s", what)


def gallery(product: Product, variant=None) -> list[str]:
    """Images shown on the product page: the selected variant's first, then the product's."""
    images: list[str] = []
    if variant is not None:
        images += [variant.image_url] + list(variant.image_json)
    images += [product.image_url] + list(product.image_json)
    seen, ordered = set(), []
    for path in images:
        if path and path not in seen:
            seen.add(path)
            ordered.append(path)
    return ordered


# --- Pages ----------------------------------------------------------------------

@client_bp.route("/")
def home():
    try:
        sliders = [s for s in map(Slider.from_api, sliders_api.fetch_sliders()) if s.status]
    except ApiError:
        _unavailable("sliders")
        sliders = []
    try:
        rows, _pagination = products_api.get_products_paginated(1, 8)
    except ApiError:
        _unavailable("latest products")
        rows = []
    return render_template(
        "client/home.html",
        sliders=sliders,
        products=[Product.from_api(p) for p in rows],
    )


@client_bp.route("/brands")
def brands():
    try:
        items = [Brand.from_api(b) for b in brands_api.fetch_brands()]
    except ApiError:
        _unavailable("brands")
        items = []
    return render_template("client/brands.html", brands=[b for b in items if b.status])


@client_bp.route("/brands/<int:brand_id>")
def brand_detail(brand_id):
    """Brand page; "load more" raises ?page and re-renders every page so far."""
    page = _page()
    per_page = current_app.config["BRAND_PRODUCTS_PAGE_SIZE"]
    try:
        raw = brands_api.get_brand(brand_id)
    except ApiError as e:
        if e.not_found:
            abort(404)
        _unavailable("brand")
        raw = {}
    if not raw:
        abort(404)
    try:
        rows, has_more = brands_api.get_brand_products(brand_id, 1, per_page * page)
    except ApiError:
        _unavailable("brand products")
        rows, has_more = [], False
    return render_template(
        "client/brand_detail.html",
        brand=Brand.from_api(raw),
        products=[Product.from_api(p) for p in rows],
        page=page,
        has_more=has_more,
    )


@client_bp.route("/categories")
def categories():
    try:
        items = [Category.from_api(c) for c in categories_api.get_categories()]
    except ApiError:
        _unavailable("categories")
        items = []
    return render_template("client/categories.html", categories=[c for c in items if c.status])


@client_bp.route("/categories/<int:parent_id>")
def subcategories(parent_id):
    search = (request.args.get("search") or "").strip()
    try:
        block = subcategories_api.get_subcategories(parent_id, search=search)
    except ApiError as e:
        if e.not_found:
            abort(404)
        _unavailable("subcategories")
        block = {"parent": {}, "subcategories": [], "total": 0}
    return render_template(
        "client/subcategories.html",
        parent=Category.from_api(block["parent"]) if block["parent"] else None,
        subcategories=[Category.from_api(c) for c in block["subcategories"] if c.get("status", True)],
        total=block["total"],
        search=search,
        parent_id=parent_id,
    )


@client_bp.route("/products")
def products():
    page = _page()
    per_page = current_app.config["STOREFRONT_PAGE_SIZE"]
    search = (request.args.get("search") or "").strip()
    category_id = request.args.get("category_id", type=int)
    brand_id = request.args.get("brand_id", type=int)
    try:
        rows, pagination = products_api.get_products_paginated(
            page, per_page, search=search, category_id=category_id, brand_id=brand_id
        )
    except ApiError:
        _unavailable("products")
        rows, pagination = [], {}
    return render_template(
        "client/products.html",
        products=[Product.from_api(p) for p in rows],
        pagination=Pagination.from_api(pagination, page, per_page),
        search=search,
        category_id=category_id,
        brand_id=brand_id,
    )


@client_bp.route("/search")
def search():
    query = (request.args.get("q") or "").strip()
    page = _page()
    try:
        rows, has_more = products_api.search_products(query, page=page)
    except ApiError:
        _unavailable("search results")
        rows, has_more = [], False
    return render_template(
        "client/search.html",
        query=query,
        products=[Product.from_api(p) for p in rows],
        page=page,
        has_more=has_more,
    )


@client_bp.route("/products/<int:product_id>")
def product_detail(product_id):
    try:
        raw = products_api.get_product(product_id)
    except ApiError as e:
        if e.not_found:
            abort(404)
        _unavailable("product")
        abort(503)
    if not raw:
        abort(404)
    product = Product.from_api(raw)

    selected = product.variant(request.args.get("variant")) if request.args.get("variant") else None
    if selected is None and product.variants:
        selected = product.variants[0]

    try:
        similar, _has_more = products_api.get_similar_products(product_id)
    except ApiError:
        _unavailable("similar products")
        similar = []

    return render_template(
        "client/product_detail.html",
        product=product,
        selected=selected,
        images=gallery(product, selected),
        similar=[Product.from_api(p) for p in similar],
    )
