from typing import Optional

from manga_catalog.domain.models.manga import Manga, MangaFilter
from manga_catalog.domain.models.pagination import PaginatedResult, PaginationRequest, PaginationResponse
from manga_catalog.domain.ports.repositories.manga_repository import MangaRepository
from manga_catalog.domain.ports.services.logger import LoggerPort
from manga_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


class CatalogQueryService:
    """Filtered, paginated reads over the manga catalog.

    The total is counted with the same filters as the page fetch but in a
    separate statement, so it reflects every matching row rather than the
    size of the returned slice. Items come back ordered by id and sanitized.
    """

    def __init__(self, manga_repository: MangaRepository, logger: Optional[LoggerPort] = None):
        self.manga_repository = manga_repository
        self.logger = logger or StdLoggerAdapter(__name__)

    async def query(self, filters: MangaFilter, pagination: PaginationRequest) -> PaginatedResult[Manga]:
        total_items = await self.manga_repository.count(filters)
        mangas = []
        # Pages past the end never reach the database.
        if pagination.offset < total_items:
            mangas = await self.manga_repository.find(filters, offset=pagination.offset, limit=pagination.limit)

        self.logger.debug(
            "Catalog query %s page=%d page_size=%d matched %d items",
            filters.model_dump(exclude_defaults=True),
            pagination.page,
            pagination.page_size,
            total_items,
        )

        return PaginatedResult[Manga](
            data=[manga.sanitize() for manga in mangas],
            pagination=PaginationResponse.build(pagination, total_items),
        )
