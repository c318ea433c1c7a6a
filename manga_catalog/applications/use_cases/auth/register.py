from manga_catalog.applications.interfaces.dtos.auth import AuthResponse, RegisterSchema
from manga_catalog.applications.interfaces.dtos.user import UserSchema
from manga_catalog.applications.services.dto_mapper import DtoMapper
from manga_catalog.applications.use_cases.user.create_user import CreateUserUseCase
from manga_catalog.domain.ports.repositories.user_repository import UserRepository
from manga_catalog.domain.ports.services.auth_service import AuthService


class RegisterUseCase:
    def __init__(self, user_repository: UserRepository, auth_service: AuthService):
        self.create_user = CreateUserUseCase(user_repository, auth_service)
        self.auth_service = auth_service

    async def execute(self, register_data: RegisterSchema) -> AuthResponse:
        user = await self.create_user.create(UserSchema(**register_data.model_dump()))
        token = self.auth_service.create_access_token(user)
        return AuthResponse(token=token, user=DtoMapper.to_user_public(user))
