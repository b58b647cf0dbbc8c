# frontend/forms/base.py
"""
Shared plumbing for the admin form schemas.

Every form is a pydantic model fed with the (unflattened) POST body. Blank
strings are dropped before validation so that required fields report
"<Label> is required" instead of a length error, and validation failures are
turned into a flat ``{"dotted.path": "message"}`` mapping that templates can
look up per input.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union, get_args

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

F = TypeVar("F", bound="FormModel")

# pydantic error type -> message template; {label} is the field title
MESSAGES = {
    "missing": "{label} is required",
    "string_too_short": "{label} must be at least {min_length} characters",
    "string_too_long": "Maximum length for {label} is {max_length} characters",
    "float_parsing": "{label} must be a number",
    "float_type": "{label} must be a number",
    "decimal_parsing": "{label} must be a number",
    "decimal_type": "{label} must be a number",
    "int_parsing": "{label} must be a number",
    "int_type": "{label} must be a number",
    "int_from_float": "{label} must be a whole number",
    "finite_number": "{label} must be a number",
    "greater_than": "{label} must be greater than {gt}",
    "greater_than_equal": "{label} must be greater than or equal to {ge}",
    "less_than": "{label} exceeds limit",
    "less_than_equal": "{label} exceeds limit",
    "decimal_max_places": "{label} can have at most {decimal_places} decimal places",
    "decimal_max_digits": "{label} exceeds limit",
    "bool_parsing": "{label} must be true or false",
    "string_pattern_mismatch": "{label} is not valid",
    "too_short": "{label} must contain at least {min_length} item(s)",
    "too_long": "{label} can contain at most {max_length} item(s)",
}


class FormModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_blank_strings(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                k: v
                for k, v in data.items()
                if not (isinstance(v, str) and not v.strip())
            }
        return data


def _inner_model(annotation) -> Optional[Type[BaseModel]]:
    """Find the BaseModel inside List[...] / Optional[...] / plain annotations."""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in get_args(annotation):
        found = _inner_model(arg)
        if found is not None:
            return found
    return None


def _humanize(name: str) -> str:
    return name.replace("_", " ").strip().capitalize()


def field_label(model: Type[BaseModel], loc: Tuple[Union[int, str], ...]) -> str:
    label = ""
    current: Optional[Type[BaseModel]] = model
    for part in loc:
        if isinstance(part, int) or current is None:
            continue
        info = current.model_fields.get(part)
        if info is None:
            label = _humanize(str(part))
            current = None
            continue
        label = info.title or _humanize(part)
        current = _inner_model(info.annotation)
    return label or "Value"


def format_error(model: Type[BaseModel], error: dict) -> str:
    template = MESSAGES.get(error["type"])
    if template is None:
        # custom PydanticCustomError messages are already human readable
        msg = error.get("msg") or "Invalid value"
        return msg[len("Value error, "):] if msg.startswith("Value error, ") else msg
    ctx = {k: _fmt(v) for k, v in (error.get("ctx") or {}).items()}
    return template.format(label=field_label(model, error["loc"]), **ctx)


def _fmt(value):
    # Decimal('0') -> "0", 9999999.99 -> "9999999.99"
    text = str(value)
    return text[:-2] if text.endswith(".0") else text


def collect_errors(model: Type[BaseModel], exc: ValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        key = ".".join(str(p) for p in error["loc"]) or "__all__"
        # first message per field wins, like a browser showing one hint per input
        errors.setdefault(key, format_error(model, error))
    return errors


def validate_form(model: Type[F], data: Dict[str, Any]) -> Tuple[Optional[F], Dict[str, str]]:
    """Return ``(form, {})`` when valid, ``(None, errors)`` otherwise."""
    try:
        return model.model_validate(data), {}
    except ValidationError as exc:
        return None, collect_errors(model, exc)
