# frontend/services/variant_matrix.py
"""
Conversion between the nested product forms and the backend's flat variant
list.

A two-attribute product is edited as variants (values of the primary
attribute) each holding options (values of the secondary attribute), but the
backend stores one variant per (variant, option) pair. Titles are joined as
"<variant title> <option title>" and split back at the first space.
"""
from __future__ import annotations

import json
from collections import OrderedDict

from frontend.models import Category, Product

SINGLE_VARIANT = "single"
SINGLE_ATTRIBUTE = "attribute"
MULTI_VARIANT = "multi"


def product_form_kind(category: Category) -> str:
    count = len(category.attributes)
    if count == 0:
        return SINGLE_VARIANT
    if count == 1:
        return SINGLE_ATTRIBUTE
    return MULTI_VARIANT


def attribute_flags(category: Category) -> tuple[bool, bool]:
    """(has_images of the primary attribute, has_images of the secondary)."""
    first = category.primary_attribute
    second = category.secondary_attribute
    return bool(first and first.has_images), bool(second and second.has_images)


# --- Image resolution -------------------------------------------------------------

def resolve_image_url(variant, option) -> str:
    h1, h2 = variant.has_attribute_images_1, variant.has_attribute_images_2
    if h1 and h2:
        return option.image_url or variant.image_url or ""
    if h1:
        return variant.image_url or ""
    if h2:
        return option.image_url or ""
    return ""


def resolve_image_list(variant, option) -> list[str]:
    h1, h2 = variant.has_attribute_images_1, variant.has_attribute_images_2
    if h1 and h2:
        return list(option.image_json) if option.image_json else list(variant.image_json or [])
    if h1:
        return list(variant.image_json or [])
    if h2:
        return list(option.image_json or [])
    return []


# --- Form -> payload ----------------------------------------------------------------

def _prices(row) -> dict:
    return {
        "sku": row.sku,
        "mrp": str(row.mrp),
        "sp": str(row.sp),
        "bp": str(row.bp),
        "stock": row.stock,
    }


def flatten_variants(variants, updating: bool = False) -> list[dict]:
    """N variants x M options -> N*M backend variants, in form order."""
    flat = []
    for variant in variants:
        for option in variant.options:
            item = {
                **_prices(option),
                "title": f"{variant.title or ''} {option.title or ''}",
                "status": True,
                "image_url": resolve_image_url(variant, option),
                "image_json": json.dumps(resolve_image_list(variant, option)),
            }
            values = [v for v in (variant.attribute_value, option.attribute_value) if v]
            if values:
                item["attributeValues"] = values
            if updating and option.id:
                item["id"] = option.id
            flat.append(item)
    return flat


def format_attribute_variants(variants, updating: bool = False) -> list[dict]:
    formatted = []
    for row in variants:
        item = {
            **_prices(row),
            "title": row.title,
            "status": row.status,
            "has_images": row.has_attribute_images_1,
            "image_url": row.image_url or None,
            "image_json": json.dumps(row.image_json) if row.image_json else None,
        }
        if row.attribute_value:
            item["attributeValues"] = [row.attribute_value]
        if updating and row.id:
            item["id"] = row.id
        formatted.append(item)
    return formatted


def format_single_variant(form, updating: bool = False) -> list[dict]:
    item = _prices(form)
    if updating and form.variant_id:
        item["id"] = form.variant_id
    return [item]


def build_product_payload(form, variants: list[dict]) -> dict:
    return {
        "name": form.name,
        "description": form.description or "",
        "itemCode": form.item_code,
        "category_id": form.category_id,
        "brandId": form.brand_id,
        "status": form.status,
        "detailList": [{"key": d.key, "value": d.value} for d in form.details],
        "featureList": [f.value for f in form.features],
        "image_url": form.image_url,
        "imageList": list(form.image_json),
        "variants": variants,
    }


def product_payload(kind: str, form, updating: bool = False) -> dict:
    if kind == MULTI_VARIANT:
        variants = flatten_variants(form.variants, updating)
    elif kind == SINGLE_ATTRIBUTE:
        variants = format_attribute_variants(form.variants, updating)
    else:
        variants = format_single_variant(form, updating)
    return build_product_payload(form, variants)


# --- Product -> form data (edit screens) ------------------------------------------

def _option_data(variant, title: str, value) -> dict:
    return {
        "id": variant.id,
        "title": title,
        "attribute_value": value.id if value else "",
        "sku": variant.sku,
        "mrp": str(variant.mrp),
        "bp": str(variant.bp),
        "sp": str(variant.sp),
        "stock": variant.stock,
        "status": variant.status,
        "image_url": variant.image_url,
        "image_json": list(variant.image_json),
    }


def group_variants(product: Product) -> list[dict]:
    """
    Rebuild the variant -> options tree of a two-attribute product.

    Variants without a value of the primary attribute cannot be placed and
    are left out, as are products that carry fewer than two attributes.
    """
    attrs = sorted(product.item_attributes, key=lambda a: not a.is_primary)
    if len(attrs) < 2 or not product.variants:
        return []
    primary_id, secondary_id = attrs[0].attribute_id, attrs[1].attribute_id

    groups: "OrderedDict[int, list]" = OrderedDict()
    for variant in product.variants:
        value = variant.value_for(primary_id)
        if value is not None:
            groups.setdefault(value.id, []).append(variant)

    tree = []
    for value_id, members in groups.items():
        first = members[0]
        tree.append({
            "title": first.title.partition(" ")[0],
            "attribute_value": value_id,
            "image_url": first.image_url,
            "image_json": list(first.image_json),
            "options": [
                _option_data(v, v.title.partition(" ")[2], v.value_for(secondary_id))
                for v in members
            ],
        })
    return tree


def product_form_data(product: Product, kind: str) -> dict:
    """Initial data of the edit form, shaped like an unflattened POST body."""
    data = {
        "name": product.name,
        "category_id": product.category_id,
        "brand_id": product.brand_id or "",
        "item_code": product.item_code,
        "description": product.description,
        "details": [{"key": d.get("key", ""), "value": d.get("value", "")} for d in product.details],
        "features": [{"value": f} for f in product.features],
        "image_url": product.image_url,
        "image_json": list(product.image_json),
        "status": product.status,
    }
    if kind == MULTI_VARIANT:
        data["variants"] = group_variants(product)
    elif kind == SINGLE_ATTRIBUTE:
        attr_id = product.item_attributes[0].attribute_id if product.item_attributes else None
        data["variants"] = [
            _option_data(v, v.title, v.value_for(attr_id) if attr_id else (v.attribute_values or [None])[0])
            for v in product.variants
        ]
    elif product.variants:
        first = product.variants[0]
        data.update({k: v for k, v in _option_data(first, "", None).items() if k in ("sku", "mrp", "bp", "sp", "stock")})
        data["variant_id"] = first.id
    return data
