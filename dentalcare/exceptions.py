from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse


class DuplicateRecordError(Exception):
    """Raised by repositories when a unique constraint rejects an insert."""


class PaymentProviderError(Exception):
    """Raised by payment gateways when the provider refuses or fails a call."""


def create_error_response(error_message: str, status_code: int = 400) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message
    }


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Custom exception handler for HTTPException"""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.detail, exc.status_code),
        headers=getattr(exc, "headers", None),
    )
