"""Custom exceptions and error handlers for the REST API."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CalculationFailedError(Exception):
    """Raised when a calculation is rejected."""

    def __init__(self, errors: list[str], error_type: str | None) -> None:
        self.errors = errors
        self.error_type = error_type or "calculation"
        super().__init__(f"Calculation failed: {errors}")


def _location(loc: tuple) -> str:
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            {"path": _location(tuple(err.get("loc", ()))), "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        logger.info(f"Rejected request to {request.url.path}: {len(details)} errors")
        return JSONResponse(
            status_code=400,
            content={
                "error": "; ".join(f"{d['path']}: {d['message']}" for d in details),
                "error_type": "validation",
                "details": details,
            },
        )

    @app.exception_handler(CalculationFailedError)
    async def calculation_failed_handler(
        request: Request, exc: CalculationFailedError
    ) -> JSONResponse:
        status_code = 400 if exc.error_type == "validation" else 422
        return JSONResponse(
            status_code=status_code,
            content={
                "error": "; ".join(exc.errors),
                "error_type": exc.error_type,
                "details": [{"message": e} for e in exc.errors],
            },
        )
