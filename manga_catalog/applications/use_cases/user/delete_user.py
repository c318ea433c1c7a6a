from manga_catalog.applications.interfaces.dtos.message import Message
from manga_catalog.domain.exceptions import NotFoundError
from manga_catalog.domain.models.user import User
from manga_catalog.domain.ports.repositories.user_repository import UserRepository
from manga_catalog.domain.services.ownership import ensure_ownership


class DeleteUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int, current_user: User) -> Message:
        existing_user = await self.user_repository.get_by_id(user_id)
        if not existing_user:
            raise NotFoundError(f"user with id {user_id} not found")

        ensure_ownership(existing_user.id, current_user.id, "delete your own account")

        success = await self.user_repository.delete(user_id)
        if not success:
            raise NotFoundError(f"user with id {user_id} not found")

        return Message(message="User deleted successfully")
