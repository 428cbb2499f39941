"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.responses import request_validation_handler
from src.catalog.api.http.routers.health import router as health_router
from src.catalog.api.http.routers.service.product import router as product_router
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.entities.service.product import ProductStore
from src.catalog.runtime.context import get_config

__all__ = ["app", "create_app"]


async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Internal Server Error",
                    "status": 500,
                    "request_id": request_id,
                },
                headers={"X-Request-ID": request_id},
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.bind(
            status_code=response.status_code,
            duration_ms=round(duration_ms, 1),
        ).info("request.end")
        response.headers.setdefault("X-Request-ID", request_id)
        return response


def create_app(product_store: ProductStore | None = None) -> FastAPI:
    """Build the HTTP application.

    The configuration is captured when the app is built. The application owns
    one ``ProductStore``, created at startup unless one is passed in, and
    hands it to every request through ``ApplicationDependencies``.
    """
    config = get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = product_store
        if store is None:
            store = ProductStore(seed=None if config.catalog.seed_products else ())
        app.state.app_dependencies = ApplicationDependencies(
            config=config, product_store=store
        )
        logger.info(
            "Starting up {} in {} environment with {} products",
            config.app.name,
            config.app.environment,
            len(store),
        )
        try:
            yield
        finally:
            logger.info("Shutting down application")

    production = config.app.environment == "production"
    application = FastAPI(
        title=config.app.name,
        lifespan=lifespan,
        docs_url=None if production else "/docs",
        redoc_url=None if production else "/redoc",
    )
    application.middleware("http")(log_requests)
    application.add_exception_handler(RequestValidationError, request_validation_handler)

    application.include_router(product_router, prefix="/api")
    application.include_router(health_router, prefix="/api")
    return application


configure_logging()

app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(
        app,
        host=config.app.host,
        port=config.app.port,
        access_log=False,  # request logging is done by log_requests
    )
