from manga_catalog.applications.interfaces.dtos.manga import MangaPublic
from manga_catalog.applications.services.dto_mapper import DtoMapper
from manga_catalog.domain.exceptions import NotFoundError
from manga_catalog.domain.ports.repositories.manga_repository import MangaRepository


class GetMangaUseCase:
    def __init__(self, manga_repository: MangaRepository):
        self.manga_repository = manga_repository

    async def execute(self, manga_id: int) -> MangaPublic:
        manga = await self.manga_repository.get_by_id(manga_id)
        if not manga:
            raise NotFoundError(f"manga with id {manga_id} not found")

        return DtoMapper.to_manga_public(manga)
