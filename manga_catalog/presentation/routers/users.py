from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from manga_catalog.applications.interfaces.dtos.message import Message
from manga_catalog.applications.interfaces.dtos.response import APIResponse
from manga_catalog.applications.interfaces.dtos.user import UserPublic, UserSchema, UserUpdateSchema
from manga_catalog.applications.use_cases.user.create_user import CreateUserUseCase
from manga_catalog.applications.use_cases.user.delete_user import DeleteUserUseCase
from manga_catalog.applications.use_cases.user.get_user import GetUserUseCase
from manga_catalog.applications.use_cases.user.get_users import GetUsersUseCase
from manga_catalog.applications.use_cases.user.update_user import UpdateUserUseCase
from manga_catalog.domain.models.pagination import PaginatedResult, PaginationRequest
from manga_catalog.domain.models.user import User
from manga_catalog.domain.ports.repositories.user_repository import UserRepository
from manga_catalog.domain.ports.services.auth_service import AuthService
from manga_catalog.infrastructure.config.dependencies import (
    get_auth_service,
    get_current_user,
    get_pagination,
    get_user_repository,
)

router = APIRouter(prefix="/users", tags=["users"])

UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]
PaginationDep = Annotated[PaginationRequest, Depends(get_pagination)]


@router.get("/", response_model=APIResponse[PaginatedResult[UserPublic]], response_model_exclude_none=True)
async def read_users(pagination: PaginationDep, user_repository: UserRepositoryDep):
    use_case = GetUsersUseCase(user_repository)
    return APIResponse.ok(await use_case.execute(pagination), "Users retrieved successfully")


@router.get("/{user_id}", response_model=APIResponse[UserPublic], response_model_exclude_none=True)
async def read_user(user_id: int, user_repository: UserRepositoryDep):
    use_case = GetUserUseCase(user_repository)
    return APIResponse.ok(await use_case.execute(user_id), "User retrieved successfully")


@router.post(
    "/",
    status_code=HTTPStatus.CREATED,
    response_model=APIResponse[UserPublic],
    response_model_exclude_none=True,
)
async def create_user(
    user: UserSchema, user_repository: UserRepositoryDep, auth_service: AuthServiceDep, current_user: CurrentUserDep
):
    use_case = CreateUserUseCase(user_repository, auth_service)
    return APIResponse.ok(await use_case.execute(user), "User created successfully")


@router.put("/{user_id}", response_model=APIResponse[UserPublic], response_model_exclude_none=True)
async def update_user(
    user_id: int,
    user: UserUpdateSchema,
    user_repository: UserRepositoryDep,
    auth_service: AuthServiceDep,
    current_user: CurrentUserDep,
):
    use_case = UpdateUserUseCase(user_repository, auth_service)
    return APIResponse.ok(await use_case.execute(user_id, user, current_user), "User updated successfully")


@router.delete("/{user_id}", response_model=APIResponse[Message], response_model_exclude_none=True)
async def delete_user(user_id: int, user_repository: UserRepositoryDep, current_user: CurrentUserDep):
    use_case = DeleteUserUseCase(user_repository)
    result = await use_case.execute(user_id, current_user)
    return APIResponse.ok(result, result.message)
