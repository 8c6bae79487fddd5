# File: /app/routers/__init__.py | Version: 2.0 | Path: /app/routers/__init__.py
"""
Router package exports.

Keeping these explicit helps static analyzers and avoids surprises
when importing submodules like: `from app.routers import users as users_router`.
"""
from . import health, users

__all__ = ["health", "users"]
