# frontend/forms/__init__.py
from .base import FormModel, validate_form
from .unflatten import unflatten_form

__all__ = ["FormModel", "validate_form", "unflatten_form"]
