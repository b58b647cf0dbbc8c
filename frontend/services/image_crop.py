# frontend/services/image_crop.py
from __future__ import annotations

import io
from dataclasses import dataclass

from PIL import Image, ImageOps, UnidentifiedImageError

CROPPED_FILENAME = "cropped_image.jpg"


class ImageCropError(ValueError):
    pass


@dataclass
class CropBox:
    """Pixel box in the coordinates of the (orientation-corrected) source image."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_form(cls, form) -> CropBox | None:
        try:
            values = [int(float(form.get(k))) for k in ("crop_x", "crop_y", "crop_width", "crop_height")]
        except (TypeError, ValueError):
            return None
        box = cls(*values)
        return box if box.width > 0 and box.height > 0 else None

    def clamp(self, width: int, height: int) -> tuple[int, int, int, int]:
        left = min(max(self.x, 0), width - 1)
        top = min(max(self.y, 0), height - 1)
        right = min(max(left + self.width, left + 1), width)
        bottom = min(max(top + self.height, top + 1), height)
        return left, top, right, bottom


def centre_box(width: int, height: int, aspect_ratio: float) -> tuple[int, int, int, int]:
    """Largest box of the given ratio (w / h) centred in the image."""
    if aspect_ratio <= 0:
        return 0, 0, width, height
    if width / height > aspect_ratio:
        new_w = max(int(round(height * aspect_ratio)), 1)
        left = (width - new_w) // 2
        return left, 0, left + new_w, height
    new_h = max(int(round(width / aspect_ratio)), 1)
    top = (height - new_h) // 2
    return 0, top, width, top + new_h


def crop_image(
    stream,
    box: CropBox | None = None,
    aspect_ratio: float = 1.0,
    max_size: int = 1600,
    quality: int = 90,
) -> bytes:
    """
    Crop an uploaded image and return it re-encoded as JPEG:
    - EXIF orientation applied
    - transparency flattened onto white, RGB
    - explicit box (clamped to the image) or centred crop to aspect_ratio
    - long side limited to max_size
    """
    try:
        img = Image.open(stream)
        img = ImageOps.exif_transpose(img)
        img.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ImageCropError("Unsupported format") from e

    if img.mode in ("RGBA", "LA") or (img.mode == "P" and "transparency" in img.info):
        img = img.convert("RGBA")
        bg = Image.new("RGB", img.size, (255, 255, 255))
        bg.paste(img, mask=img.split()[-1])
        img = bg
    elif img.mode != "RGB":
        img = img.convert("RGB")

    width, height = img.size
    bounds = box.clamp(width, height) if box else centre_box(width, height, aspect_ratio)
    img = img.crop(bounds)
    img.thumbnail((max_size, max_size), Image.Resampling.LANCZOS)

    out = io.BytesIO()
    img.save(out, format="JPEG", quality=quality, optimize=True)
    return out.getvalue()
