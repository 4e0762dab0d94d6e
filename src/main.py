"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from config.settings import settings
from src.mp_admin.api.router import router as admin_router
from src.mp_common.database import engine
from src.mp_common.errors import AppError, ServerError
from src.mp_common.response import error_content
from src.mp_contract.api.router import router as contract_router
from src.mp_gateway.middleware.request_log import RequestLogMiddleware
from src.mp_gateway.validation.params import validation_error_to_app_error
from src.mp_settlement.api.router import router as settlement_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: verify DB connection. Shutdown: dispose."""
    # Startup
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    yield
    # Shutdown
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


def _error_json(exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=error_content(exc))


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error(
            "%s %s failed: %s %s",
            request.method,
            request.url.path,
            exc.code,
            exc.message,
        )
    return _error_json(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_json(validation_error_to_app_error(exc))


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("storage failure on %s %s", request.method, request.url.path)
    return _error_json(ServerError())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return _error_json(ServerError())


app.include_router(contract_router)
app.include_router(settlement_router)
app.include_router(admin_router)


@app.get("/health")
async def health() -> JSONResponse:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("health check: database unreachable")
        return _error_json(ServerError("Database unreachable"))
    return JSONResponse({"status": "ok", "version": "0.1.0"})
