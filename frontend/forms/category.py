# frontend/forms/category.py
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from frontend.forms.base import FormModel

MAX_CATEGORY_ATTRIBUTES = 2


class CategoryForm(FormModel):
    name: str = Field(..., title="Name", min_length=2, max_length=50)
    description: Optional[str] = Field(None, title="Description", max_length=3000)
    link: Optional[str] = Field(None, title="Link", max_length=300)
    image: Optional[str] = Field(None, title="Image")
    secondary_image: Optional[str] = Field(None, title="Secondary image")
    status: bool = True

    def payload(self) -> dict:
        return {
            "name": self.name,
            "description": self.description or "",
            "link": self.link or "",
            "image": self.image,
            "secondary_image": self.secondary_image,
            "status": self.status,
        }


class CategoryAttributeRow(FormModel):
    attribute_id: int = Field(..., title="Attribute")
    has_images: bool = False
    is_primary: bool = False


class SubcategoryForm(CategoryForm):
    parent_id: int = Field(..., title="Parent category")
    attributes: List[CategoryAttributeRow] = Field(default_factory=list, title="Attributes")

    @field_validator("attributes", mode="before")
    @classmethod
    def _skip_blank_rows(cls, rows):
        if not isinstance(rows, list):
            return rows
        return [
            row for row in rows
            if not isinstance(row, dict) or str(row.get("attribute_id") or "").strip()
        ]

    @field_validator("attributes")
    @classmethod
    def _check_attributes(cls, rows: List[CategoryAttributeRow]):
        if len(rows) > MAX_CATEGORY_ATTRIBUTES:
            raise PydanticCustomError(
                "too_many_attributes",
                "You can only add up to {limit} attributes",
                {"limit": MAX_CATEGORY_ATTRIBUTES},
            )
        ids = [row.attribute_id for row in rows]
        if len(set(ids)) != len(ids):
            raise PydanticCustomError("duplicate_attribute", "Each attribute can only be added once")
        if sum(1 for row in rows if row.is_primary) > 1:
            raise PydanticCustomError("multiple_primary", "Only one attribute can be primary")
        return rows

    def payload(self) -> dict:
        data = super().payload()
        data["parent_id"] = self.parent_id
        data["attributes"] = [
            {"AttributeId": row.attribute_id, "HasImages": row.has_images, "IsPrimary": row.is_primary}
            for row in self.attributes
        ]
        return data
