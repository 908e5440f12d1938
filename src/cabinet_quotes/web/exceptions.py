"""Custom exceptions and error handlers for the REST API."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cabinet_quotes.contracts.errors import (
    QuoteFileError,
    QuoteNotFoundError,
    QuoteSaveError,
)

logger = logging.getLogger(__name__)


class QuoteSaveFailedError(Exception):
    """Raised when an edit was applied but could not be saved."""

    def __init__(self, quote_id: str | None, message: str) -> None:
        self.quote_id = quote_id
        self.message = message
        super().__init__(message)


class InvalidEditError(Exception):
    """Raised when an edit is rejected by the domain model."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(QuoteNotFoundError)
    async def quote_not_found_handler(
        request: Request, exc: QuoteNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Quote not found: {exc.quote_id}",
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(QuoteSaveFailedError)
    async def save_failed_handler(
        request: Request, exc: QuoteSaveFailedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=503,
            content={
                "error": exc.message,
                "error_type": "save_failed",
                "details": {"quote_id": exc.quote_id, "retryable": True},
            },
        )

    @app.exception_handler(QuoteSaveError)
    async def save_error_handler(request: Request, exc: QuoteSaveError) -> JSONResponse:
        logger.warning(f"Quote store write failed: {exc}")
        return JSONResponse(
            status_code=503,
            content={
                "error": "Failed to save changes. Please try again.",
                "error_type": "save_failed",
                "details": {"quote_id": exc.quote_id, "retryable": True},
            },
        )

    @app.exception_handler(QuoteFileError)
    async def quote_file_error_handler(
        request: Request, exc: QuoteFileError
    ) -> JSONResponse:
        logger.warning(f"Stored quote is unreadable: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Stored quote could not be read",
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(InvalidEditError)
    async def invalid_edit_handler(
        request: Request, exc: InvalidEditError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": "invalid_edit",
                "details": None,
            },
        )
