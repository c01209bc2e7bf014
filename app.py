"""
app.py
------
Application factory. Wires routers to an explicitly supplied connection
pool and registers the only error-to-status translation in the service.
"""

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from db.connection import ConnectionPool
from errors import DecodeError, MappingError, NotFound, PoolError, UserServiceError
from handlers import echo_handler, user_handler
from utils.logger import get_logger

logger = get_logger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "malformed request"


async def _decode_error(request: Request, exc: DecodeError) -> Response:
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def _validation_error(request: Request, exc: RequestValidationError) -> Response:
    return await _decode_error(request, DecodeError(_describe_validation_error(exc)))


async def _not_found(request: Request, exc: NotFound) -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def _pool_error(request: Request, exc: PoolError) -> Response:
    # The pool message is returned on purpose as a diagnostic aid.
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def _internal_error(request: Request, exc: UserServiceError) -> Response:
    if isinstance(exc, MappingError):
        logger.error(f"Row mapping failed on {request.url.path}: {exc}")
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(db_pool: ConnectionPool) -> FastAPI:
    """Build the HTTP application around ``db_pool``."""
    app = FastAPI(title="User Service")
    app.state.pool = db_pool

    app.include_router(echo_handler.router)
    app.include_router(user_handler.router)

    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(DecodeError, _decode_error)
    app.add_exception_handler(NotFound, _not_found)
    app.add_exception_handler(PoolError, _pool_error)
    app.add_exception_handler(UserServiceError, _internal_error)
    return app


__all__ = ["create_app"]
