from manga_catalog.applications.interfaces.dtos.message import Message
from manga_catalog.domain.exceptions import NotFoundError
from manga_catalog.domain.models.user import User
from manga_catalog.domain.ports.repositories.manga_repository import MangaRepository
from manga_catalog.domain.services.ownership import ensure_ownership
from manga_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteMangaUseCase:
    def __init__(self, manga_repository: MangaRepository):
        self.manga_repository = manga_repository

    async def execute(self, manga_id: int, current_user: User) -> Message:
        existing_manga = await self.manga_repository.get_by_id(manga_id)
        if not existing_manga:
            raise NotFoundError(f"manga with id {manga_id} not found")

        ensure_ownership(existing_manga.owner_id, current_user.id, "delete your own manga")

        success = await self.manga_repository.delete(manga_id)
        if not success:
            raise NotFoundError(f"manga with id {manga_id} not found")

        logger.info(f"Manga {manga_id} soft-deleted by user {current_user.id}")
        return Message(message="Manga deleted successfully")
