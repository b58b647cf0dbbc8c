import io

import pytest
from werkzeug.datastructures import FileStorage

from frontend.forms import validate_form
from frontend.forms.attribute import AttributeValueBatchForm
from frontend.forms.auth import LoginForm, ResetPasswordForm
from frontend.forms.brand import BrandForm
from frontend.forms.category import SubcategoryForm
from frontend.forms.product import (
    MultiVariantProductForm,
    SingleAttributeProductForm,
    SingleVariantProductForm,
    inject_image_flags,
)
from frontend.forms.rules import (
    ATTRIBUTE_VARIANT,
    OPTION,
    PRODUCT,
    VARIANT,
    check_upload,
    image_required,
)


def prices(**overrides):
    row = {"sku": "TS-01", "mrp": "25.00", "bp": "10.00", "sp": "19.99", "stock": "7"}
    row.update(overrides)
    return row


# --- Brand ---------------------------------------------------------------------

def test_brand_required_fields():
    form, errors = validate_form(BrandForm, {"name": "  ", "status": "1"})
    assert form is None
    assert errors["name"] == "Name is required"
    assert errors["description"] == "Description is required"
    assert errors["image1"] == "image is required"


def test_brand_length_messages():
    _form, errors = validate_form(
        BrandForm,
        {"name": "A", "description": "x" * 1001, "image1": "brands/a.jpg"},
    )
    assert errors["name"] == "Name must be at least 2 characters"
    assert errors["description"] == "Maximum length for Description is 1000 characters"


def test_brand_payload_blanks_optional_fields():
    form, errors = validate_form(
        BrandForm,
        {"name": "Acme", "description": "<p>Hi</p>", "image1": "brands/a.jpg", "status": "0"},
    )
    assert errors == {}
    payload = form.payload()
    assert payload["status"] is False
    assert payload["image2"] == ""
    assert payload["description3"] == ""


# --- Subcategory attributes ----------------------------------------------------

def subcategory(attributes):
    return {"name": "Shirts", "parent_id": "1", "status": "1", "attributes": attributes}


def test_subcategory_allows_at_most_two_attributes():
    rows = [{"attribute_id": str(i)} for i in (1, 2, 3)]
    _form, errors = validate_form(SubcategoryForm, subcategory(rows))
    assert errors["attributes"] == "You can only add up to 2 attributes"


def test_subcategory_rejects_duplicate_attribute():
    _form, errors = validate_form(SubcategoryForm, subcategory([{"attribute_id": "4"}, {"attribute_id": "4"}]))
    assert errors["attributes"] == "Each attribute can only be added once"


def test_subcategory_single_primary():
    rows = [{"attribute_id": "1", "is_primary": "1"}, {"attribute_id": "2", "is_primary": "1"}]
    _form, errors = validate_form(SubcategoryForm, subcategory(rows))
    assert errors["attributes"] == "Only one attribute can be primary"


def test_subcategory_skips_blank_rows_and_maps_payload():
    rows = [
        {"attribute_id": "1", "has_images": "1", "is_primary": "1"},
        {"attribute_id": "", "has_images": "0", "is_primary": "0"},
        {"attribute_id": "2", "has_images": "0", "is_primary": "0"},
    ]
    form, errors = validate_form(SubcategoryForm, subcategory(rows))
    assert errors == {}
    assert form.payload()["attributes"] == [
        {"AttributeId": 1, "HasImages": True, "IsPrimary": True},
        {"AttributeId": 2, "HasImages": False, "IsPrimary": False},
    ]
    assert form.payload()["parent_id"] == 1


def test_attribute_value_batch_needs_a_row():
    _form, errors = validate_form(AttributeValueBatchForm, {})
    assert errors["values"] == "Values is required"
    _form, errors = validate_form(AttributeValueBatchForm, {"values": [{"value": "x" * 101}]})
    assert errors["values.0.value"] == "Maximum length for Value is 100 characters"


# --- Auth ----------------------------------------------------------------------

def test_login_email_pattern():
    _form, errors = validate_form(LoginForm, {"email": "not-an-email", "password": "secret"})
    assert errors == {"email": "Email is not valid"}


def test_reset_password_rules():
    _form, errors = validate_form(
        ResetPasswordForm,
        {"email": "a@b.test", "code": "123456", "password": "short", "password_confirmation": "short"},
    )
    assert errors["password"] == "Password must be at least 8 characters"

    _form, errors = validate_form(
        ResetPasswordForm,
        {"email": "a@b.test", "code": "123456", "password": "long-enough", "password_confirmation": "different"},
    )
    assert errors == {"password_confirmation": "Passwords do not match"}


# --- Product: prices -------------------------------------------------------------

def single(**overrides):
    data = {"name": "Plain tee", "category_id": "5", "brand_id": "3", "image_url": "products/tee.jpg", **prices()}
    data.update(overrides)
    return data


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("sku", "ABCDEFGHIJK", "Maximum length for SKU is 10 characters"),
        ("mrp", "0", "MRP must be greater than 0"),
        ("bp", "abc", "BP must be a number"),
        ("sp", "10000000", "SP exceeds limit"),
        ("stock", "-1", "Stock must be greater than or equal to 0"),
        ("stock", "100001", "Stock exceeds limit"),
        ("sku", "", "SKU is required"),
    ],
)
def test_price_field_messages(field, value, message):
    _form, errors = validate_form(SingleVariantProductForm, single(**{field: value}))
    assert errors[field] == message


def test_product_name_and_brand_required():
    _form, errors = validate_form(SingleVariantProductForm, single(name="", brand_id=""))
    assert errors["name"] == "Name is required"
    assert errors["brand_id"] == "Brand is required"


def test_single_variant_product_always_needs_an_image():
    _form, errors = validate_form(SingleVariantProductForm, single(image_url=""))
    assert errors["image_url"] == "Primary image is required"


def test_details_and_features_rows_are_validated():
    _form, errors = validate_form(
        SingleVariantProductForm,
        single(details=[{"key": "Fabric", "value": ""}], features=[{"value": ""}]),
    )
    assert errors["details.0.value"] == "Detail Value is required"
    assert errors["features.0.value"] == "Feature is required"


# --- Product: conditional images -------------------------------------------------

@pytest.mark.parametrize(
    "h1, h2, product, variant, option, attribute_variant",
    [
        (False, False, True, False, False, False),
        (True, False, False, True, False, True),
        (False, True, False, False, False, False),
        (True, True, False, False, True, True),
    ],
)
def test_image_required_truth_table(h1, h2, product, variant, option, attribute_variant):
    assert image_required(PRODUCT, h1, h2) is product
    assert image_required(VARIANT, h1, h2) is variant
    assert image_required(OPTION, h1, h2) is option
    assert image_required(ATTRIBUTE_VARIANT, h1, h2) is attribute_variant


def test_image_required_unknown_level():
    with pytest.raises(ValueError):
        image_required("gallery", True, True)


def multi(options_image="", variant_image=""):
    return {
        "name": "Tee",
        "category_id": "5",
        "brand_id": "3",
        "variants": [
            {
                "title": "Red",
                "attribute_value": "11",
                "image_url": variant_image,
                "options": [{"title": "S", "attribute_value": "21", "image_url": options_image, **prices()}],
            }
        ],
    }


def test_multi_variant_first_attribute_images_require_variant_image():
    data = inject_image_flags(multi(), True, False)
    _form, errors = validate_form(MultiVariantProductForm, data)
    assert errors == {"variants.0.image_url": "Primary image is required"}


def test_multi_variant_both_attributes_images_require_option_image():
    data = inject_image_flags(multi(), True, True)
    _form, errors = validate_form(MultiVariantProductForm, data)
    assert errors == {"variants.0.options.0.image_url": "Primary image is required"}


def test_multi_variant_without_attribute_images_requires_product_image():
    _form, errors = validate_form(MultiVariantProductForm, inject_image_flags(multi(), False, False))
    assert errors == {"image_url": "Primary image is required"}


def test_submitted_flags_are_overwritten_by_the_category():
    data = multi()
    data["has_attribute_images_1"] = "0"
    data["variants"][0]["has_attribute_images_1"] = "0"
    _form, errors = validate_form(MultiVariantProductForm, inject_image_flags(data, True, False))
    assert "variants.0.image_url" in errors


def test_multi_variant_needs_variants_and_options():
    data = inject_image_flags({"name": "Tee", "category_id": "5", "brand_id": "3", "image_url": "p.jpg"}, False, False)
    _form, errors = validate_form(MultiVariantProductForm, data)
    assert errors == {"variants": "At least one variant is required"}

    data = multi()
    data["image_url"] = "p.jpg"
    data["variants"][0]["options"] = []
    _form, errors = validate_form(MultiVariantProductForm, inject_image_flags(data, False, False))
    assert errors == {"variants.0.options": "At least one option is required"}


def test_single_attribute_rows_need_title_value_and_image():
    data = {
        "name": "Mug",
        "category_id": "6",
        "brand_id": "3",
        "variants": [{"title": "", "attribute_value": "", **prices()}],
    }
    _form, errors = validate_form(SingleAttributeProductForm, inject_image_flags(data, True, False))
    assert errors["variants.0.title"] == "Title is required"
    assert errors["variants.0.attribute_value"] == "Attribute value is required"
    assert errors["variants.0.image_url"] == "Primary image is required"


def test_image_json_accepts_textarea_lines():
    form, errors = validate_form(
        SingleVariantProductForm,
        single(image_json="products/a.jpg\n\n  products/b.jpg  \n"),
    )
    assert errors == {}
    assert form.image_json == ["products/a.jpg", "products/b.jpg"]


# --- Uploads -----------------------------------------------------------------------

SUPPORTED = ("image/jpeg", "image/png")


def upload(size, content_type="image/png", filename="a.png"):
    return FileStorage(stream=io.BytesIO(b"x" * size), filename=filename, content_type=content_type)


def test_check_upload():
    one_mb = 1024 * 1024
    assert check_upload(None, one_mb, SUPPORTED) is None
    assert check_upload(upload(10), one_mb, SUPPORTED) is None
    assert check_upload(upload(10, "application/pdf", "a.pdf"), one_mb, SUPPORTED) == "Unsupported format"
    assert check_upload(upload(one_mb + 1), one_mb, SUPPORTED, label="Secondary image") == (
        "Secondary image must be less than 1MB."
    )
