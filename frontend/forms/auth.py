# frontend/forms/auth.py
from pydantic import Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from frontend.forms.base import FormModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class LoginForm(FormModel):
    email: str = Field(..., title="Email", pattern=EMAIL_PATTERN, max_length=100)
    password: str = Field(..., title="Password")


class ForgotPasswordForm(FormModel):
    email: str = Field(..., title="Email", pattern=EMAIL_PATTERN, max_length=100)


class ResetPasswordForm(FormModel):
    email: str = Field(..., title="Email", pattern=EMAIL_PATTERN, max_length=100)
    code: str = Field(..., title="Code", max_length=10)
    password: str = Field(..., title="Password", min_length=8)
    password_confirmation: str = Field(..., title="Password confirmation")

    @field_validator("password_confirmation")
    @classmethod
    def _passwords_match(cls, value: str, info: ValidationInfo):
        if "password" in info.data and value != info.data["password"]:
            raise PydanticCustomError("password_mismatch", "Passwords do not match")
        return value
