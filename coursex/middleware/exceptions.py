from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from coursex.core.exceptions import DomainException
from coursex.schemas.response import ErrorResponse, ErrorDetail
from datetime import datetime, timezone
import logging
import uuid

logger = logging.getLogger(__name__)

def _get_error_code(status_code: int) -> str:
    code_map = {
        400: "BAD_REQUEST",
        401: "UNAUTHORIZED",
        402: "PAYMENT_REQUIRED",
        403: "FORBIDDEN",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        409: "CONFLICT",
        422: "VALIDATION_ERROR",
        500: "INTERNAL_SERVER_ERROR",
        502: "UPSTREAM_FAILURE",
    }
    return code_map.get(status_code, f"HTTP_{status_code}")

def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())

def _error_body(request: Request, request_id: str, code: str, message: str, details=None) -> dict:
    error_response = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details),
        timestamp=datetime.now(timezone.utc).isoformat(),
        path=request.url.path,
        request_id=request_id
    )
    return jsonable_encoder(error_response)

async def domain_exception_handler(request: Request, exc: DomainException):
    request_id = _request_id(request)
    content = _error_body(request, request_id, exc.code, exc.message, exc.details)
    content.update(exc.extra_content())
    logger.warning(f"[{request_id}] {exc.status_code} {exc.code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=content)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    request_id = _request_id(request)
    content = _error_body(
        request,
        request_id,
        "VALIDATION_ERROR",
        "Request validation failed",
        {"validation_errors": jsonable_encoder(exc.errors())}
    )
    logger.warning(f"[{request_id}] Validation error: {exc.errors()}")
    return JSONResponse(status_code=422, content=content)

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    request_id = _request_id(request)
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    content = _error_body(request, request_id, _get_error_code(exc.status_code), message)
    logger.warning(f"[{request_id}] HTTP {exc.status_code}: {message}")
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))

async def global_exception_handler(request: Request, exc: Exception):
    if isinstance(exc, DomainException):
        return await domain_exception_handler(request, exc)
    if isinstance(exc, (HTTPException, StarletteHTTPException)):
        return await http_exception_handler(request, exc)

    request_id = _request_id(request)
    content = _error_body(
        request,
        request_id,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
        {"error_type": type(exc).__name__}
    )
    logger.error(f"[{request_id}] Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content=content)
