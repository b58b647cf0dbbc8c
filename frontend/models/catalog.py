# frontend/models/catalog.py
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from frontend.models._fields import json_list, to_bool, to_decimal, to_int


@dataclass
class Brand:
    id: int
    name: str
    status: bool = True
    description: str = ""
    description1: str = ""
    description2: str = ""
    description3: str = ""
    image1: str = ""
    image2: str = ""
    image3: str = ""
    products_count: int = 0

    @classmethod
    def from_api(cls, data: dict) -> "Brand":
        return cls(
            id=to_int(data.get("id")),
            name=data.get("name") or "",
            status=to_bool(data.get("status", True)),
            description=data.get("description") or "",
            description1=data.get("description1") or "",
            description2=data.get("description2") or "",
            description3=data.get("description3") or "",
            image1=data.get("image1") or "",
            image2=data.get("image2") or "",
            image3=data.get("image3") or "",
            products_count=to_int(data.get("products_count"), 0),
        )

    @property
    def images(self) -> list[str]:
        return [p for p in (self.image1, self.image2, self.image3) if p]


@dataclass
class Slider:
    id: int
    title: str
    image: str = ""
    description: str = ""
    link: str = ""
    open_in_new_tab: bool = False
    status: bool = True
    order: int = 1

    @classmethod
    def from_api(cls, data: dict) -> "Slider":
        return cls(
            id=to_int(data.get("id")),
            title=data.get("title") or "",
            image=data.get("image") or "",
            description=data.get("description") or "",
            link=data.get("link") or "",
            open_in_new_tab=to_bool(data.get("open_in_new_tab", False)),
            status=to_bool(data.get("status", True)),
            order=to_int(data.get("order"), 1),
        )


@dataclass
class AttributeValue:
    id: int
    value: str
    attribute_id: int | None = None
    description: str = ""
    status: bool = True

    @classmethod
    def from_api(cls, data: dict) -> "AttributeValue":
        return cls(
            id=to_int(data.get("id")),
            value=data.get("value") or "",
            attribute_id=to_int(data.get("attribute_id")),
            description=data.get("description") or "",
            status=to_bool(data.get("status", True)),
        )


@dataclass
class Attribute:
    """An attribute as attached to a category (pivot flags) or standalone."""

    id: int
    name: str
    description: str = ""
    status: bool = True
    has_images: bool = False
    is_primary: bool = False
    values: list[AttributeValue] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "Attribute":
        pivot = data.get("pivot") or {}
        return cls(
            id=to_int(data.get("id", data.get("attribute_id"))),
            name=data.get("name") or "",
            description=data.get("description") or "",
            status=to_bool(data.get("status", True)),
            has_images=to_bool(pivot.get("has_images", data.get("has_images", False))),
            is_primary=to_bool(pivot.get("is_primary", data.get("is_primary", False))),
            values=[AttributeValue.from_api(v) for v in (data.get("values") or [])],
        )


@dataclass
class Category:
    id: int
    name: str
    description: str = ""
    link: str = ""
    image: str = ""
    secondary_image: str = ""
    status: bool = True
    parent_id: int | None = None
    children: list["Category"] = field(default_factory=list)
    attributes: list[Attribute] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "Category":
        return cls(
            id=to_int(data.get("id")),
            name=data.get("name") or "",
            description=data.get("description") or "",
            link=data.get("link") or "",
            image=data.get("image") or "",
            secondary_image=data.get("secondary_image") or "",
            status=to_bool(data.get("status", True)),
            parent_id=to_int(data.get("parent_id")),
            children=[cls.from_api(c) for c in (data.get("children") or [])],
            attributes=[Attribute.from_api(a) for a in (data.get("attributes") or [])],
        )

    @property
    def primary_attribute(self) -> Attribute | None:
        attrs = sorted(self.attributes, key=lambda a: not a.is_primary)
        return attrs[0] if attrs else None

    @property
    def secondary_attribute(self) -> Attribute | None:
        attrs = sorted(self.attributes, key=lambda a: not a.is_primary)
        return attrs[1] if len(attrs) > 1 else None


@dataclass
class ItemAttribute:
    """Attribute attached to a product, with the category's pivot flags copied over."""

    attribute_id: int
    is_primary: bool = False
    has_images: bool = False
    name: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "ItemAttribute":
        attribute = data.get("attribute") or {}
        return cls(
            attribute_id=to_int(data.get("attribute_id", attribute.get("id"))),
            is_primary=to_bool(data.get("is_primary")),
            has_images=to_bool(data.get("has_images")),
            name=attribute.get("name") or "",
        )


@dataclass
class Variant:
    id: int | None
    title: str = ""
    sku: str = ""
    mrp: Decimal = Decimal("0")
    sp: Decimal = Decimal("0")
    bp: Decimal = Decimal("0")
    stock: int = 0
    status: bool = True
    image_url: str = ""
    image_json: list[str] = field(default_factory=list)
    attribute_values: list[AttributeValue] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "Variant":
        return cls(
            id=to_int(data.get("id")),
            title=data.get("title") or "",
            sku=data.get("sku") or "",
            mrp=to_decimal(data.get("mrp")),
            sp=to_decimal(data.get("sp")),
            bp=to_decimal(data.get("bp")),
            stock=to_int(data.get("stock"), 0),
            status=to_bool(data.get("status", True)),
            image_url=data.get("image_url") or "",
            image_json=json_list(data.get("image_json")),
            attribute_values=[AttributeValue.from_api(v) for v in (data.get("attribute_values") or [])],
        )

    def value_for(self, attribute_id) -> AttributeValue | None:
        for value in self.attribute_values:
            if value.attribute_id == attribute_id:
                return value
        return None

    @property
    def discount_percent(self) -> int:
        if self.mrp <= 0 or self.sp >= self.mrp:
            return 0
        return int((self.mrp - self.sp) * 100 / self.mrp)


@dataclass
class Product:
    id: int
    name: str
    description: str = ""
    item_code: str = ""
    status: bool = True
    image_url: str = ""
    image_json: list[str] = field(default_factory=list)
    features: list[str] = field(default_factory=list)
    details: list[dict] = field(default_factory=list)
    category_id: int | None = None
    brand_id: int | None = None
    category: Category | None = None
    brand: Brand | None = None
    variants: list[Variant] = field(default_factory=list)
    item_attributes: list[ItemAttribute] = field(default_factory=list)
    rating_summary: dict = field(default_factory=dict)
    # Aggregates from the admin listing
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    total_stock: int = 0
    variants_count: int = 0

    @classmethod
    def from_api(cls, data: dict) -> "Product":
        category = data.get("category")
        brand = data.get("brand")
        variants = [Variant.from_api(v) for v in (data.get("variants") or [])]
        return cls(
            id=to_int(data.get("id")),
            name=data.get("name") or "",
            description=data.get("description") or "",
            item_code=data.get("item_code") or "",
            status=to_bool(data.get("status", True)),
            image_url=data.get("image_url") or "",
            image_json=json_list(data.get("image_json")),
            features=[str(f) for f in json_list(data.get("feature_json"))],
            details=[d for d in json_list(data.get("detail_json")) if isinstance(d, dict)],
            category_id=to_int(data.get("category_id", (category or {}).get("id"))),
            brand_id=to_int(data.get("brand_id", (brand or {}).get("id"))),
            category=Category.from_api(category) if category else None,
            brand=Brand.from_api(brand) if brand else None,
            variants=variants,
            item_attributes=[ItemAttribute.from_api(a) for a in (data.get("item_attributes") or [])],
            rating_summary=data.get("rating_summary") or {},
            min_price=to_decimal(data["min_price"], None) if data.get("min_price") is not None else None,
            max_price=to_decimal(data["max_price"], None) if data.get("max_price") is not None else None,
            total_stock=to_int(data.get("total_stock"), sum(v.stock for v in variants)),
            variants_count=to_int(data.get("variants_count"), len(variants)),
        )

    @property
    def price_range(self) -> tuple[Decimal, Decimal] | None:
        """(lowest, highest) selling price across variants, or the listing aggregates."""
        prices = [v.sp for v in self.variants if v.sp > 0]
        if prices:
            return min(prices), max(prices)
        if self.min_price is not None:
            return self.min_price, self.max_price if self.max_price is not None else self.min_price
        return None

    def variant(self, variant_id) -> Variant | None:
        wanted = to_int(variant_id)
        for v in self.variants:
            if v.id == wanted:
                return v
        return None
