"""
MealPrep FastAPI Application
Main entry point: configuration, logging, middleware and routers
"""

from contextlib import asynccontextmanager
import logging

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from adapters import mongo_adapter
from api.middleware import (
    RequestLoggingMiddleware,
    general_exception_handler,
    http_exception_handler,
    mealprep_exception_handler,
    validation_exception_handler,
)
from api.routes import grocery, health, pantry, plans
from app.config import PlanStoreBackend, settings
from app.exceptions import MealPrepError
from domain.models import init_database

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format=settings.log_format,
)
_logger = logging.getLogger("mealprep.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: create the pantry tables and, for the mongo backend, open the
    plan store connection. Shutdown: close it again.
    """
    _logger.info(
        "Starting %s %s (%s, plan store: %s)",
        settings.app_name,
        settings.app_version,
        settings.environment.value,
        settings.plan_store_backend.value,
    )

    # create_all blocks; keep it off the event loop
    await anyio.to_thread.run_sync(init_database)

    if settings.plan_store_backend == PlanStoreBackend.MONGO:
        mongo_adapter.connect(settings.mongo_uri, settings.mongo_db_name)

    try:
        yield
    finally:
        mongo_adapter.close()
        _logger.info("%s stopped", settings.app_name)


def create_app() -> FastAPI:
    docs_enabled = not settings.is_production()
    application = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=f"{settings.api_prefix}/openapi.json" if docs_enabled else None,
        docs_url=f"{settings.api_prefix}/docs" if docs_enabled else None,
        redoc_url=f"{settings.api_prefix}/redoc" if docs_enabled else None,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestLoggingMiddleware)

    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(MealPrepError, mealprep_exception_handler)
    application.add_exception_handler(Exception, general_exception_handler)

    for module in (health, plans, grocery, pantry):
        application.include_router(module.router, prefix=settings.api_prefix)

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
