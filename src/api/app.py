"""FastAPI application factory"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.error import ClientError
from src.api.routes import business_profile, customers, health, invoices
from src.depends import engine

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({duration_ms:.1f}ms)"
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    # No migrations; tables are created on startup
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables verified/created")

    yield

    await engine.dispose()


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Invoicing Service",
        description="Multi-tenant invoices, customers and business profiles",
        version="1.0.0",
        docs_url=f"{config.API_PREFIX}/docs",
        openapi_url=f"{config.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(ClientError)
    async def client_error_handler(request: Request, exc: ClientError):
        if exc.status_code >= 500:
            logger.error(
                f"{request.method} {request.url.path} failed: "
                f"{exc.error.code} ({exc.error.reason})"
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_response_body())

    app.include_router(health.router)
    app.include_router(invoices.router)
    app.include_router(customers.router)
    app.include_router(business_profile.router)

    return app
