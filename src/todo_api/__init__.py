"""
FastAPI Todo API package.

The application is built with `todo_api.main.create_app`, which loads the
JSON store before returning the app.
"""

from .main import create_app

__all__ = ["create_app"]
