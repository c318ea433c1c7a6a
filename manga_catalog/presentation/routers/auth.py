from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from manga_catalog.applications.interfaces.dtos.auth import AuthResponse, LoginSchema, RegisterSchema, Token
from manga_catalog.applications.interfaces.dtos.response import APIResponse
from manga_catalog.applications.interfaces.dtos.user import UserPublic
from manga_catalog.applications.services.dto_mapper import DtoMapper
from manga_catalog.applications.use_cases.auth.login import LoginUseCase
from manga_catalog.applications.use_cases.auth.register import RegisterUseCase
from manga_catalog.domain.models.user import User
from manga_catalog.domain.ports.repositories.user_repository import UserRepository
from manga_catalog.domain.ports.services.auth_service import AuthService
from manga_catalog.infrastructure.config.dependencies import get_auth_service, get_current_user, get_user_repository

router = APIRouter(prefix="/auth", tags=["auth"])

OAuth2Form = Annotated[OAuth2PasswordRequestForm, Depends()]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]


@router.post(
    "/register",
    status_code=HTTPStatus.CREATED,
    response_model=APIResponse[AuthResponse],
    response_model_exclude_none=True,
)
async def register(payload: RegisterSchema, user_repository: UserRepositoryDep, auth_service: AuthServiceDep):
    use_case = RegisterUseCase(user_repository, auth_service)
    return APIResponse.ok(await use_case.execute(payload), "User registered successfully")


@router.post("/login", response_model=APIResponse[AuthResponse], response_model_exclude_none=True)
async def login(payload: LoginSchema, user_repository: UserRepositoryDep, auth_service: AuthServiceDep):
    use_case = LoginUseCase(user_repository, auth_service)
    return APIResponse.ok(await use_case.execute(payload.email, payload.password), "Login successful")


@router.post("/token", response_model=Token)
async def login_for_access_token(
    form_data: OAuth2Form, user_repository: UserRepositoryDep, auth_service: AuthServiceDep
):
    use_case = LoginUseCase(user_repository, auth_service)
    user = await use_case.authenticate(form_data.username, form_data.password)
    return Token(access_token=auth_service.create_access_token(user), token_type="bearer")


@router.get("/me", response_model=APIResponse[UserPublic], response_model_exclude_none=True)
async def read_me(current_user: CurrentUserDep):
    return APIResponse.ok(DtoMapper.to_user_public(current_user), "User information retrieved successfully")
