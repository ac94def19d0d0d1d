"""
Mapping of domain errors to HTTP responses.

Only the error code and the user-safe message leave the API; no stack detail.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from api.models import ErrorResponse
from domain.errors import ErrorCode, VendingError

STATUS_BY_CODE = {
    ErrorCode.INVALID_INPUT: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.DUPLICATE_ID: 409,
    ErrorCode.OUT_OF_STOCK: 409,
    ErrorCode.IO_FAILURE: 500,
}


def vending_error_handler(request: Request, exc: VendingError) -> JSONResponse:
    status_code = STATUS_BY_CODE.get(exc.code, 400)
    body = ErrorResponse(error=exc.code.value, detail=exc.message, status_code=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump())
