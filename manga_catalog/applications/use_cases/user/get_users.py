from manga_catalog.applications.interfaces.dtos.user import UserPublic
from manga_catalog.applications.services.dto_mapper import DtoMapper
from manga_catalog.domain.models.pagination import PaginatedResult, PaginationRequest, PaginationResponse
from manga_catalog.domain.ports.repositories.user_repository import UserRepository


class GetUsersUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, pagination: PaginationRequest) -> PaginatedResult[UserPublic]:
        total_items = await self.user_repository.count()
        users = []
        if pagination.offset < total_items:
            users = await self.user_repository.get_all(offset=pagination.offset, limit=pagination.limit)

        return PaginatedResult[UserPublic](
            data=[DtoMapper.to_user_public(user) for user in users if user.id is not None],
            pagination=PaginationResponse.build(pagination, total_items),
        )
