"""FastAPI REST API for cabinet quotes.

Usage:
    uvicorn cabinet_quotes.web:app --reload
"""

from cabinet_quotes.web.app import app, create_app

__all__ = ["app", "create_app"]
