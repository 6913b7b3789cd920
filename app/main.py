import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.config import Settings, get_settings
from app.core.errors import RestaurantError, StoreFailure
from app.core.logging import setup_logging
from app.database import engine, init_schema
from app.routers import (
    auth_router,
    dashboard_router,
    health_router,
    inventory_router,
    items_router,
    orders_router,
)

setup_logging()
settings: Settings = get_settings()
logger = logging.getLogger(__name__)

ROUTERS = (
    health_router,
    auth_router,
    inventory_router,
    orders_router,
    dashboard_router,
    items_router,
)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_schema(engine)
    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
    try:
        yield
    finally:
        engine.dispose()


async def restaurant_error_handler(_request: Request, exc: RestaurantError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Request failed: %s", exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def store_error_handler(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Store operation failed: %s", exc.__class__.__name__)
    failure = StoreFailure()
    return JSONResponse(status_code=failure.status_code, content={"detail": failure.detail})


def create_app(*, use_lifespan: bool = True) -> FastAPI:
    application = FastAPI(title=settings.APP_NAME, lifespan=lifespan if use_lifespan else None)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(RestaurantError, restaurant_error_handler)
    application.add_exception_handler(SQLAlchemyError, store_error_handler)
    for router in ROUTERS:
        application.include_router(router)
    return application


app = create_app()


def run() -> None:
    import uvicorn

    logger.info("Server running on port %s", settings.PORT)
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()


__all__ = ["app", "create_app", "run"]
