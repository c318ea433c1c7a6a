from manga_catalog.applications.interfaces.dtos.user import UserPublic
from manga_catalog.applications.services.dto_mapper import DtoMapper
from manga_catalog.domain.exceptions import NotFoundError
from manga_catalog.domain.ports.repositories.user_repository import UserRepository


class GetUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int) -> UserPublic:
        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"user with id {user_id} not found")

        return DtoMapper.to_user_public(user)
