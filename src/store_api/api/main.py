from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from store_api.api.v1.routes import (
    customers_router,
    health_router,
    products_router,
    sales_router,
)
from store_api.core.config import settings
from store_api.core.exceptions import BaseApplicationException, ValidationException
from store_api.core.logging import get_logger, get_logger_with_context
from store_api.data_access.db import create_all

logger = get_logger(__name__)


async def application_exception_handler(
    request: Request, exc: BaseApplicationException
) -> JSONResponse:
    status_code = exc.status_code
    request_logger = get_logger_with_context(
        __name__, method=request.method, path=request.url.path, status_code=status_code
    )
    if status_code >= 500:
        request_logger.error(f"{exc.error_code}: {exc.message}")
    else:
        request_logger.warning(f"{exc.error_code}: {exc.message}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report every invalid field as a "<field> - <message>" reason."""
    reasons = [_reason(error) for error in exc.errors()]
    error = ValidationException("Request validation failed", error_code="VALIDATION_ERROR")
    error.details["reasons"] = reasons
    logger.warning(f"Invalid request on {request.method} {request.url.path}: {reasons}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_dict())


def _reason(error: dict[str, Any]) -> str:
    # Drop the "body"/"query"/"path" prefix of the location.
    location = [str(part) for part in error.get("loc", ())[1:]] or ["request"]
    return f"{'.'.join(location)} - {error.get('msg', 'invalid value')}"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Store API starting up", extra={"env": settings.environment.value})
    create_all()
    yield
    logger.info("Store API shutting down")


def create_app(create_tables: bool = True) -> FastAPI:
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan if create_tables else None,
    )

    app.add_exception_handler(BaseApplicationException, application_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(health_router)
    app.include_router(customers_router, prefix=settings.api_prefix)
    app.include_router(products_router, prefix=settings.api_prefix)
    app.include_router(sales_router, prefix=settings.api_prefix)
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "store_api.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=not settings.is_production,
    )


if __name__ == "__main__":
    run()
