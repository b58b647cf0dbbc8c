# frontend/models/__init__.py
from .catalog import Attribute, AttributeValue, Brand, Category, ItemAttribute, Product, Slider, Variant
from .pagination import Pagination
from .user import SessionUser, User, UserDetail

__all__ = [
    "Attribute",
    "AttributeValue",
    "Brand",
    "Category",
    "ItemAttribute",
    "Product",
    "Slider",
    "Variant",
    "Pagination",
    "SessionUser",
    "User",
    "UserDetail",
]
