"""API routers for the REST API."""

from cabinet_quotes.web.routers.quotes import router as quotes_router

__all__ = ["quotes_router"]
