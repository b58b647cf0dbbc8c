# frontend/forms/slider.py
from typing import Optional

from pydantic import AnyUrl, Field, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from frontend.forms.base import FormModel

_URL = TypeAdapter(AnyUrl)


class SliderForm(FormModel):
    title: str = Field(..., title="Title", min_length=2, max_length=100)
    description: Optional[str] = Field(None, title="Description", max_length=1000)
    link: Optional[str] = Field(None, title="Link", max_length=500)
    open_in_new_tab: bool = False
    status: bool = True
    image: str = Field(..., title="Image")

    @field_validator("link")
    @classmethod
    def _absolute_url(cls, value: Optional[str]):
        if value is None:
            return value
        try:
            _URL.validate_python(value)
        except ValidationError:
            raise PydanticCustomError("invalid_url", "Please enter a valid URL") from None
        return value

    def payload(self) -> dict:
        return {
            "title": self.title,
            "description": self.description or "",
            "link": self.link or "",
            "open_in_new_tab": self.open_in_new_tab,
            "status": self.status,
            "image": self.image,
        }
