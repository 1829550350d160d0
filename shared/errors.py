"""
Error kinds raised by the service layer and their HTTP mapping.

NotFound and validation failures are client-caused and carry a readable
message. Store failures are logged in full but answered with a generic
message so driver errors never reach the client.
"""
import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger(__name__)


class ServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class StoreError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # loc looks like ("body", "minQty") or ("path", "product_id")
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    if field:
        return f"Invalid value for '{field}': {first.get('msg', 'invalid')}"
    return f"Invalid request: {first.get('msg', 'invalid')}"


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error(
            "store_error",
            path=request.url.path,
            message=exc.message,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
        )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": _describe_validation_error(exc)},
    )


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("unhandled_store_error", path=request.url.path, error=repr(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
