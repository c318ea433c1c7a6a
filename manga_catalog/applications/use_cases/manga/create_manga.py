from manga_catalog.applications.interfaces.dtos.manga import MangaPublic, MangaSchema
from manga_catalog.applications.services.dto_mapper import DtoMapper
from manga_catalog.domain.exceptions import ValidationError
from manga_catalog.domain.models.manga import Manga
from manga_catalog.domain.models.user import User
from manga_catalog.domain.ports.repositories.manga_repository import MangaRepository
from manga_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateMangaUseCase:
    def __init__(self, manga_repository: MangaRepository):
        self.manga_repository = manga_repository

    async def execute(self, manga_data: MangaSchema, current_user: User) -> MangaPublic:
        manga = Manga(
            name=manga_data.name,
            price=manga_data.price,
            is_active=manga_data.is_active,
            owner_id=current_user.id or 0,
        )

        if not manga.is_valid():
            raise ValidationError("invalid manga data")

        created_manga = await self.manga_repository.create(manga)
        if created_manga.id is None:
            raise RuntimeError("Manga creation failed - no ID assigned")

        logger.info(f"Manga {created_manga.id} created by user {current_user.id}")

        return DtoMapper.to_manga_public(created_manga)
