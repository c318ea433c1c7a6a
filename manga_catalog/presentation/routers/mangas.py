from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from manga_catalog.applications.interfaces.dtos.filter_page import CatalogFilterParams
from manga_catalog.applications.interfaces.dtos.manga import MangaPublic, MangaSchema
from manga_catalog.applications.interfaces.dtos.message import Message
from manga_catalog.applications.interfaces.dtos.response import APIResponse
from manga_catalog.applications.services.catalog_query_service import CatalogQueryService
from manga_catalog.applications.use_cases.manga.create_manga import CreateMangaUseCase
from manga_catalog.applications.use_cases.manga.delete_manga import DeleteMangaUseCase
from manga_catalog.applications.use_cases.manga.get_manga import GetMangaUseCase
from manga_catalog.applications.use_cases.manga.get_mangas import GetMangasUseCase
from manga_catalog.applications.use_cases.manga.update_manga import UpdateMangaUseCase
from manga_catalog.domain.models.manga import MangaFilter
from manga_catalog.domain.models.pagination import PaginatedResult, PaginationRequest
from manga_catalog.domain.models.user import User
from manga_catalog.domain.ports.repositories.manga_repository import MangaRepository
from manga_catalog.infrastructure.config.dependencies import (
    get_catalog_query_service,
    get_current_user,
    get_manga_repository,
    get_pagination,
)

router = APIRouter(prefix="/mangas", tags=["mangas"])

MangaRepositoryDep = Annotated[MangaRepository, Depends(get_manga_repository)]
CatalogQueryServiceDep = Annotated[CatalogQueryService, Depends(get_catalog_query_service)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]
PaginationDep = Annotated[PaginationRequest, Depends(get_pagination)]

MangaPage = APIResponse[PaginatedResult[MangaPublic]]


async def _list(service: CatalogQueryService, filters: MangaFilter, pagination: PaginationRequest, message: str):
    use_case = GetMangasUseCase(service)
    return APIResponse.ok(await use_case.execute(filters, pagination), message)


@router.get("/", response_model=MangaPage, response_model_exclude_none=True)
async def read_mangas(
    filter_mangas: Annotated[CatalogFilterParams, Query()],
    pagination: PaginationDep,
    catalog_query_service: CatalogQueryServiceDep,
):
    filters = MangaFilter(
        active_only=filter_mangas.active_only,
        price_min=filter_mangas.min,
        price_max=filter_mangas.max,
        owner_id=filter_mangas.userID,
    )
    return await _list(catalog_query_service, filters, pagination, "Paginated mangas retrieved successfully")


@router.get("/active", response_model=MangaPage, response_model_exclude_none=True)
async def read_active_mangas(pagination: PaginationDep, catalog_query_service: CatalogQueryServiceDep):
    filters = MangaFilter(active_only=True)
    return await _list(catalog_query_service, filters, pagination, "Paginated active mangas retrieved successfully")


@router.get("/price", response_model=MangaPage, response_model_exclude_none=True)
async def read_mangas_by_price_range(
    pagination: PaginationDep,
    catalog_query_service: CatalogQueryServiceDep,
    min: Annotated[Optional[float], Query()] = None,
    max: Annotated[Optional[float], Query()] = None,
):
    filters = MangaFilter(price_min=min, price_max=max)
    return await _list(
        catalog_query_service, filters, pagination, "Paginated mangas by price range retrieved successfully"
    )


@router.get("/user/{user_id}", response_model=MangaPage, response_model_exclude_none=True)
async def read_user_mangas(user_id: int, pagination: PaginationDep, catalog_query_service: CatalogQueryServiceDep):
    filters = MangaFilter(owner_id=user_id)
    return await _list(catalog_query_service, filters, pagination, "Paginated user mangas retrieved successfully")


@router.get("/{manga_id}", response_model=APIResponse[MangaPublic], response_model_exclude_none=True)
async def read_manga(manga_id: int, manga_repository: MangaRepositoryDep):
    use_case = GetMangaUseCase(manga_repository)
    return APIResponse.ok(await use_case.execute(manga_id), "Manga retrieved successfully")


@router.post(
    "/",
    status_code=HTTPStatus.CREATED,
    response_model=APIResponse[MangaPublic],
    response_model_exclude_none=True,
)
async def create_manga(manga: MangaSchema, manga_repository: MangaRepositoryDep, current_user: CurrentUserDep):
    use_case = CreateMangaUseCase(manga_repository)
    return APIResponse.ok(await use_case.execute(manga, current_user), "Manga created successfully")


@router.put("/{manga_id}", response_model=APIResponse[MangaPublic], response_model_exclude_none=True)
async def update_manga(
    manga_id: int, manga: MangaSchema, manga_repository: MangaRepositoryDep, current_user: CurrentUserDep
):
    use_case = UpdateMangaUseCase(manga_repository)
    return APIResponse.ok(await use_case.execute(manga_id, manga, current_user), "Manga updated successfully")


@router.delete("/{manga_id}", response_model=APIResponse[Message], response_model_exclude_none=True)
async def delete_manga(manga_id: int, manga_repository: MangaRepositoryDep, current_user: CurrentUserDep):
    use_case = DeleteMangaUseCase(manga_repository)
    result = await use_case.execute(manga_id, current_user)
    return APIResponse.ok(result, result.message)
