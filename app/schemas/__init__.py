# File: /app/schemas/__init__.py | Version: 2.0 | Path: /app/schemas/__init__.py
from . import auth, user

__all__ = ["auth", "user"]
