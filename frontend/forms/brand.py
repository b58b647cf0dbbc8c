# frontend/forms/brand.py
from typing import Optional

from pydantic import Field

from frontend.forms.base import FormModel


class BrandForm(FormModel):
    name: str = Field(..., title="Name", min_length=2, max_length=50)
    description: str = Field(..., title="Description", max_length=1000)
    image1: str = Field(..., title="image")
    description1: Optional[str] = Field(None, title="Description", max_length=1000)
    image2: Optional[str] = Field(None, title="Image")
    description2: Optional[str] = Field(None, title="Description", max_length=1000)
    image3: Optional[str] = Field(None, title="Image")
    description3: Optional[str] = Field(None, title="Description", max_length=1000)
    status: bool = True

    def payload(self) -> dict:
        data = self.model_dump()
        return {k: ("" if v is None else v) for k, v in data.items()}
