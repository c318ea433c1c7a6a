from manga_catalog.applications.interfaces.dtos.user import UserPublic, UserSchema
from manga_catalog.applications.services.dto_mapper import DtoMapper
from manga_catalog.domain.exceptions import ConflictError, ValidationError
from manga_catalog.domain.models.user import User
from manga_catalog.domain.ports.repositories.user_repository import UserRepository
from manga_catalog.domain.ports.services.auth_service import AuthService
from manga_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateUserUseCase:
    def __init__(self, user_repository: UserRepository, auth_service: AuthService):
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def create(self, user_data: UserSchema) -> User:
        if await self.user_repository.get_by_email(user_data.email):
            raise ConflictError("user with this email already exists")

        user = User(
            name=user_data.name,
            email=user_data.email,
            password_hash=self.auth_service.hash_password(user_data.password),
        )
        if not user.is_valid():
            raise ValidationError("invalid user data")

        created_user = await self.user_repository.create(user)
        if created_user.id is None:
            raise RuntimeError("User creation failed - no ID assigned")

        logger.info(f"User created successfully: {created_user.id}")
        return created_user

    async def execute(self, user_data: UserSchema) -> UserPublic:
        created_user = await self.create(user_data)
        return DtoMapper.to_user_public(created_user)
