from manga_catalog.applications.interfaces.dtos.auth import AuthResponse
from manga_catalog.applications.services.dto_mapper import DtoMapper
from manga_catalog.domain.exceptions import AuthenticationError
from manga_catalog.domain.models.user import User
from manga_catalog.domain.ports.repositories.user_repository import UserRepository
from manga_catalog.domain.ports.services.auth_service import AuthService
from manga_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

INVALID_CREDENTIALS = "invalid email or password"


class LoginUseCase:
    def __init__(self, user_repository: UserRepository, auth_service: AuthService):
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def authenticate(self, email: str, password: str) -> User:
        user = await self.user_repository.get_by_email(email)

        # Same error for unknown email and wrong password.
        if not user or not user.password_hash:
            raise AuthenticationError(INVALID_CREDENTIALS)
        if not self.auth_service.verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for user {user.id}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        return user

    async def execute(self, email: str, password: str) -> AuthResponse:
        user = await self.authenticate(email, password)
        token = self.auth_service.create_access_token(user)
        return AuthResponse(token=token, user=DtoMapper.to_user_public(user))
