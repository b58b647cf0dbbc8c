# frontend/forms/rules.py
from __future__ import annotations

from pydantic_core import PydanticCustomError

PRODUCT = "product"
VARIANT = "variant"
OPTION = "option"
ATTRIBUTE_VARIANT = "attribute_variant"


def image_required(level: str, has_images_1: bool, has_images_2: bool = False) -> bool:
    """
    Which level of a product carries the primary image.

    Images live on the deepest level whose attribute declares images:
    option when both attributes have them, variant when only the first one
    does, product when none does. The second attribute alone never moves
    the requirement to the option.
    """
    h1, h2 = bool(has_images_1), bool(has_images_2)
    if level == PRODUCT:
        return not h1 and not h2
    if level == VARIANT:
        return h1 and not h2
    if level == OPTION:
        return h1 and h2
    if level == ATTRIBUTE_VARIANT:
        return h1
    raise ValueError(f"unknown image level: {level!r}")


def require_image(value, level: str, has_images_1: bool, has_images_2: bool = False):
    if image_required(level, has_images_1, has_images_2) and not (value or "").strip():
        raise PydanticCustomError("image_required", "Primary image is required")
    return value


def check_upload(file_storage, max_bytes: int, supported_types, label: str = "Image") -> str | None:
    """
    Validate an uploaded werkzeug FileStorage. Returns an error message or None.
    """
    if file_storage is None or not getattr(file_storage, "filename", ""):
        return None
    mimetype = (file_storage.mimetype or "").lower()
    if mimetype not in supported_types:
        return "Unsupported format"
    stream = file_storage.stream
    pos = stream.tell()
    stream.seek(0, 2)
    size = stream.tell()
    stream.seek(pos)
    if size > max_bytes:
        return f"{label} must be less than {max_bytes // (1024 * 1024)}MB."
    return None
