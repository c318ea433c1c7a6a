from manga_catalog.applications.interfaces.dtos.manga import MangaPublic
from manga_catalog.applications.services.catalog_query_service import CatalogQueryService
from manga_catalog.applications.services.dto_mapper import DtoMapper
from manga_catalog.domain.models.manga import MangaFilter
from manga_catalog.domain.models.pagination import PaginatedResult, PaginationRequest


class GetMangasUseCase:
    def __init__(self, catalog_query_service: CatalogQueryService):
        self.catalog_query_service = catalog_query_service

    async def execute(self, filters: MangaFilter, pagination: PaginationRequest) -> PaginatedResult[MangaPublic]:
        result = await self.catalog_query_service.query(filters, pagination)
        return DtoMapper.to_manga_page(result)
