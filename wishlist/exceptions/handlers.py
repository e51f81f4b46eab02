from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from .base import AppException, ErrorCode

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return consistent error response"""
    if exc.status_code >= 500:
        logger.error(f"AppException: {exc.code.value} - {exc.message}", exc_info=True)
    else:
        logger.warning(f"AppException: {exc.code.value} - {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors"""
    logger.warning(f"Validation error: {exc}")

    return JSONResponse(
        status_code=400,
        content={
            "code": ErrorCode.VALIDATION_ERROR.value,
            "message": "Validation failed",
            "details": {
                "errors": [
                    {
                        "field": err.get("loc", ["unknown"])[-1],
                        "message": err.get("msg", "Invalid value"),
                        "type": err.get("type", "validation_error")
                    }
                    for err in exc.errors()
                ]
            }
        }
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions (fallback)"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "code": ErrorCode.INTERNAL_SERVER_ERROR.value,
            "message": "Something went wrong"
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
