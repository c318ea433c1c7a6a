from manga_catalog.applications.interfaces.dtos.user import UserPublic, UserUpdateSchema
from manga_catalog.applications.services.dto_mapper import DtoMapper
from manga_catalog.domain.exceptions import ConflictError, NotFoundError
from manga_catalog.domain.models.user import User
from manga_catalog.domain.ports.repositories.user_repository import UserRepository
from manga_catalog.domain.ports.services.auth_service import AuthService
from manga_catalog.domain.services.ownership import ensure_ownership


class UpdateUserUseCase:
    def __init__(self, user_repository: UserRepository, auth_service: AuthService):
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def execute(self, user_id: int, user_data: UserUpdateSchema, current_user: User) -> UserPublic:
        existing_user = await self.user_repository.get_by_id(user_id)
        if not existing_user:
            raise NotFoundError(f"user with id {user_id} not found")

        ensure_ownership(existing_user.id, current_user.id, "update your own account")

        email_owner = await self.user_repository.get_by_email(user_data.email)
        if email_owner and email_owner.id != user_id:
            raise ConflictError("user with this email already exists")

        password_hash = existing_user.password_hash
        if user_data.password:
            password_hash = self.auth_service.hash_password(user_data.password)

        updated_user = existing_user.model_copy(
            update={"name": user_data.name, "email": user_data.email, "password_hash": password_hash}
        )

        saved_user = await self.user_repository.update(updated_user)
        return DtoMapper.to_user_public(saved_user)
