from contextlib import asynccontextmanager
from http import HTTPStatus

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from manga_catalog.applications.interfaces.dtos.response import APIResponse
from manga_catalog.infrastructure.config.dependencies import get_settings
from manga_catalog.infrastructure.config.settings import API_V1_PREFIX, APP_VERSION
from manga_catalog.infrastructure.logging.logger import Logger, setup_logging
from manga_catalog.infrastructure.persistence.database import create_tables, dispose_engine, get_engine, set_engine
from manga_catalog.presentation.exception_handlers import register_exception_handlers
from manga_catalog.presentation.middleware import RequestLoggingMiddleware
from manga_catalog.presentation.routers import auth, mangas, users

setup_logging()
logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    engine = get_engine()
    set_engine(engine)
    if settings.AUTO_CREATE_TABLES:
        await create_tables(engine)
        logger.info("Database tables are up to date")
    try:
        yield
    finally:
        await dispose_engine()


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(title="Manga Catalog API", version=APP_VERSION, lifespan=lifespan)

    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(application)

    application.include_router(auth.router, prefix=API_V1_PREFIX)
    application.include_router(users.router, prefix=API_V1_PREFIX)
    application.include_router(mangas.router, prefix=API_V1_PREFIX)

    @application.get("/", status_code=HTTPStatus.OK, response_model=APIResponse[dict], response_model_exclude_none=True)
    def read_root():
        return APIResponse.ok({"version": APP_VERSION}, "Manga Catalog API is running")

    return application


app = create_app()


def run():
    settings = get_settings()
    logger.info(f"Starting server on {settings.HOST}:{settings.PORT}")
    uvicorn.run("manga_catalog.app:app", host=settings.HOST, port=settings.PORT)
