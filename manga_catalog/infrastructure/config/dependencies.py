from functools import lru_cache
from http import HTTPStatus
from typing import Annotated

from fastapi import Depends, HTTPException, Query
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from manga_catalog.applications.services.catalog_query_service import CatalogQueryService
from manga_catalog.domain.models.pagination import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, PaginationRequest
from manga_catalog.domain.models.user import User
from manga_catalog.domain.ports.repositories.manga_repository import MangaRepository
from manga_catalog.domain.ports.repositories.user_repository import UserRepository
from manga_catalog.domain.ports.services.auth_service import AuthService
from manga_catalog.domain.ports.services.logger import LoggerPort
from manga_catalog.infrastructure.adapters.repositories.sqlalchemy_manga_repository import (
    SQLAlchemyMangaRepository,
)
from manga_catalog.infrastructure.adapters.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)
from manga_catalog.infrastructure.adapters.services.jwt_auth_service import JWTAuthService
from manga_catalog.infrastructure.config.settings import API_V1_PREFIX, Settings
from manga_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from manga_catalog.infrastructure.persistence.database import get_session

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_V1_PREFIX}/auth/token")


def get_logger() -> LoggerPort:
    return StdLoggerAdapter(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    return SQLAlchemyUserRepository(session)


def get_manga_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> MangaRepository:
    return SQLAlchemyMangaRepository(session)


def get_auth_service(
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return JWTAuthService(user_repository, settings)


def get_catalog_query_service(
    manga_repository: Annotated[MangaRepository, Depends(get_manga_repository)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> CatalogQueryService:
    return CatalogQueryService(manga_repository, logger=logger)


def get_pagination(
    page: Annotated[int, Query(description="Page number, values below 1 fall back to 1")] = DEFAULT_PAGE,
    page_size: Annotated[
        int, Query(description="Items per page, values outside 1..100 fall back to 10")
    ] = DEFAULT_PAGE_SIZE,
) -> PaginationRequest:
    return PaginationRequest.normalize(page, page_size)


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    user = await auth_service.get_current_user(token)
    if not user:
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
