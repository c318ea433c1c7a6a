from manga_catalog.applications.interfaces.dtos.manga import MangaPublic, MangaSchema
from manga_catalog.applications.services.dto_mapper import DtoMapper
from manga_catalog.domain.exceptions import NotFoundError, ValidationError
from manga_catalog.domain.models.user import User
from manga_catalog.domain.ports.repositories.manga_repository import MangaRepository
from manga_catalog.domain.services.ownership import ensure_ownership
from manga_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateMangaUseCase:
    def __init__(self, manga_repository: MangaRepository):
        self.manga_repository = manga_repository

    async def execute(self, manga_id: int, manga_data: MangaSchema, current_user: User) -> MangaPublic:
        existing_manga = await self.manga_repository.get_by_id(manga_id)
        if not existing_manga:
            raise NotFoundError(f"manga with id {manga_id} not found")

        ensure_ownership(existing_manga.owner_id, current_user.id, "update your own manga")

        updated_manga = existing_manga.model_copy(
            update={"name": manga_data.name, "price": manga_data.price, "is_active": manga_data.is_active}
        )
        if not updated_manga.is_valid():
            raise ValidationError("invalid manga data")

        saved_manga = await self.manga_repository.update(updated_manga)
        logger.info(f"Manga {manga_id} updated by user {current_user.id}")

        return DtoMapper.to_manga_public(saved_manga)
