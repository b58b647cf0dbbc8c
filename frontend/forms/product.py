# frontend/forms/product.py
"""
Product form schemas.

The shape of the form depends on how many attributes the product's category
declares: none (one implicit variant), one (a row per attribute value) or
two (variants of the first attribute, each with options of the second).
The ``has_attribute_images_*`` flags come from the category and are written
into the submitted data by the view before validation.
"""
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BeforeValidator, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from frontend.forms import rules
from frontend.forms.base import FormModel

PRICE_LIMIT = Decimal("9999999.99")
STOCK_LIMIT = 100000


def _image_list(value):
    if value is None:
        return []
    if isinstance(value, str):
        value = value.splitlines()
    return [str(v).strip() for v in value if str(v or "").strip()]


# Newline separated textarea or repeated image_json[] inputs
ImageList = Annotated[List[str], BeforeValidator(_image_list)]


def _flag(info: ValidationInfo, name: str) -> bool:
    return bool(info.data.get(name))


class DetailRow(FormModel):
    key: str = Field(..., title="Detail Key")
    value: str = Field(..., title="Detail Value")


class FeatureRow(FormModel):
    value: str = Field(..., title="Feature")


class PriceFields(FormModel):
    sku: str = Field(..., title="SKU", max_length=10)
    mrp: Decimal = Field(..., title="MRP", gt=0, le=PRICE_LIMIT)
    bp: Decimal = Field(..., title="BP", gt=0, le=PRICE_LIMIT)
    sp: Decimal = Field(..., title="SP", gt=0, le=PRICE_LIMIT)
    stock: int = Field(..., title="Stock", ge=0, le=STOCK_LIMIT)
    status: bool = True


class ProductBaseForm(FormModel):
    has_attribute_images_1: bool = False
    has_attribute_images_2: bool = False

    name: str = Field(..., title="Name", min_length=2, max_length=50)
    category_id: int = Field(..., title="Category")
    brand_id: int = Field(..., title="Brand")
    item_code: Optional[str] = Field(None, title="Item code", max_length=50)
    description: Optional[str] = Field(None, title="Description")
    details: List[DetailRow] = Field(default_factory=list, title="Details")
    features: List[FeatureRow] = Field(default_factory=list, title="Features")
    image_url: Optional[str] = Field(None, title="Primary image", validate_default=True)
    image_json: ImageList = Field(default_factory=list, title="Images")
    status: bool = True

    @field_validator("image_url")
    @classmethod
    def _product_image(cls, value, info: ValidationInfo):
        return rules.require_image(
            value,
            rules.PRODUCT,
            _flag(info, "has_attribute_images_1"),
            _flag(info, "has_attribute_images_2"),
        )


class SingleVariantProductForm(ProductBaseForm, PriceFields):
    """Category without attributes: prices live on the product, image always required."""

    variant_id: Optional[int] = None


# --- One attribute --------------------------------------------------------------

class AttributeVariantRow(PriceFields):
    has_attribute_images_1: bool = False

    id: Optional[int] = None
    title: str = Field(..., title="Title")
    attribute_value: int = Field(..., title="Attribute value")
    image_url: Optional[str] = Field(None, title="Primary image", validate_default=True)
    image_json: ImageList = Field(default_factory=list, title="Images")

    @field_validator("image_url")
    @classmethod
    def _variant_image(cls, value, info: ValidationInfo):
        return rules.require_image(value, rules.ATTRIBUTE_VARIANT, _flag(info, "has_attribute_images_1"))


class SingleAttributeProductForm(ProductBaseForm):
    variants: List[AttributeVariantRow] = Field(default_factory=list, title="Variants", validate_default=True)

    @field_validator("variants")
    @classmethod
    def _at_least_one(cls, rows):
        if not rows:
            raise PydanticCustomError("no_variants", "At least one variant is required")
        return rows


# --- Two attributes -------------------------------------------------------------

class OptionRow(PriceFields):
    has_attribute_images_1: bool = False
    has_attribute_images_2: bool = False

    id: Optional[int] = None
    title: Optional[str] = Field(None, title="Title")
    attribute_value: int = Field(..., title="Option value")
    image_url: Optional[str] = Field(None, title="Primary image", validate_default=True)
    image_json: ImageList = Field(default_factory=list, title="Images")

    @field_validator("image_url")
    @classmethod
    def _option_image(cls, value, info: ValidationInfo):
        return rules.require_image(
            value,
            rules.OPTION,
            _flag(info, "has_attribute_images_1"),
            _flag(info, "has_attribute_images_2"),
        )


class MultiVariantRow(FormModel):
    has_attribute_images_1: bool = False
    has_attribute_images_2: bool = False

    title: Optional[str] = Field(None, title="Title")
    attribute_value: int = Field(..., title="Variant value")
    image_url: Optional[str] = Field(None, title="Primary image", validate_default=True)
    image_json: ImageList = Field(default_factory=list, title="Images")
    options: List[OptionRow] = Field(default_factory=list, title="Options", validate_default=True)

    @field_validator("image_url")
    @classmethod
    def _variant_image(cls, value, info: ValidationInfo):
        return rules.require_image(
            value,
            rules.VARIANT,
            _flag(info, "has_attribute_images_1"),
            _flag(info, "has_attribute_images_2"),
        )

    @field_validator("options")
    @classmethod
    def _at_least_one(cls, rows):
        if not rows:
            raise PydanticCustomError("no_options", "At least one option is required")
        return rows


class MultiVariantProductForm(ProductBaseForm):
    variants: List[MultiVariantRow] = Field(default_factory=list, title="Variants", validate_default=True)

    @field_validator("variants")
    @classmethod
    def _at_least_one(cls, rows):
        if not rows:
            raise PydanticCustomError("no_variants", "At least one variant is required")
        return rows


def inject_image_flags(data: dict, has_images_1: bool, has_images_2: bool) -> dict:
    """Overwrite every image flag in the submitted data with the category's values."""
    data = dict(data)
    data["has_attribute_images_1"] = has_images_1
    data["has_attribute_images_2"] = has_images_2
    variants = []
    for row in data.get("variants") or []:
        if not isinstance(row, dict):
            continue
        row = {**row, "has_attribute_images_1": has_images_1, "has_attribute_images_2": has_images_2}
        row["options"] = [
            {**opt, "has_attribute_images_1": has_images_1, "has_attribute_images_2": has_images_2}
            for opt in (row.get("options") or [])
            if isinstance(opt, dict)
        ]
        variants.append(row)
    if "variants" in data:
        data["variants"] = variants
    return data
