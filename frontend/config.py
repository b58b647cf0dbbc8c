# frontend/config.py
import os
from dotenv import load_dotenv

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(BASE_DIR, ".env"))


def _env(key: str, default=None):
    v = os.getenv(key)
    return v if v not in (None, "", "None") else default


def _env_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v in (None, "", "None"):
        return default
    return str(v).strip().lower() in ("1", "true", "t", "yes", "y", "on")


def _env_int(key: str, default: int) -> int:
    try:
        return int(_env(key, default))
    except (TypeError, ValueError):
        return default


class Config:
    SECRET_KEY = _env("SECRET_KEY", "dev-please-change-me")
    JSON_AS_ASCII = False

    # Catalog REST backend
    API_URL = _env("API_URL", "http://localhost:8000")
    UPLOAD_BASE = _env("UPLOAD_BASE", _env("API_URL", "http://localhost:8000"))
    API_TIMEOUT = float(_env("API_TIMEOUT", 15))
    API_DEBUG = _env_bool("API_DEBUG", False)

    ADMIN_ROLE = _env("ADMIN_ROLE", "Admin")

    # Page sizes used by list screens
    ADMIN_PAGE_SIZE = _env_int("ADMIN_PAGE_SIZE", 20)
    USERS_PAGE_SIZE = _env_int("USERS_PAGE_SIZE", 15)
    STOREFRONT_PAGE_SIZE = _env_int("STOREFRONT_PAGE_SIZE", 20)
    BRAND_PRODUCTS_PAGE_SIZE = _env_int("BRAND_PRODUCTS_PAGE_SIZE", 8)

    # Image uploads (cropper + category images)
    MAX_IMAGE_BYTES = _env_int("MAX_IMAGE_BYTES", 8 * 1024 * 1024)
    SUPPORTED_IMAGE_TYPES = (
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/webp",
        "image/avif",
    )
    IMAGE_DIRECTORIES = ("products", "brands", "categories", "sliders")


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "testing"
    API_URL = "http://api.test"
    UPLOAD_BASE = "http://media.test"
    API_TIMEOUT = 2.0
