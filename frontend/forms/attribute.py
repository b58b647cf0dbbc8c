# frontend/forms/attribute.py
from typing import List, Optional

from pydantic import Field

from frontend.forms.base import FormModel


class AttributeForm(FormModel):
    name: str = Field(..., title="Name", max_length=50)
    description: Optional[str] = Field(None, title="Description")
    status: bool = True


class AttributeValueForm(FormModel):
    value: str = Field(..., title="Value", max_length=100)
    description: Optional[str] = Field(None, title="Description", max_length=255)
    status: bool = True


class AttributeValueBatchForm(FormModel):
    """Create screen: several values for one attribute submitted together."""

    values: List[AttributeValueForm] = Field(..., title="Values", min_length=1)

    def payload(self) -> list:
        return [v.model_dump() for v in self.values]
