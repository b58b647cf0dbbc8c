# frontend/client/__init__.py
from .routes import client_bp

__all__ = ["client_bp"]
