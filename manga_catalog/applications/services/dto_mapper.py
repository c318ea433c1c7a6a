from manga_catalog.applications.interfaces.dtos.manga import MangaPublic
from manga_catalog.applications.interfaces.dtos.user import UserPublic
from manga_catalog.domain.models.manga import Manga
from manga_catalog.domain.models.pagination import PaginatedResult
from manga_catalog.domain.models.user import User


class DtoMapper:
    """Maps sanitized domain entities to public DTOs"""

    @staticmethod
    def to_user_public(user: User) -> UserPublic:
        if user.id is None:
            raise RuntimeError("Cannot expose a user without an ID")

        user = user.sanitize()
        return UserPublic(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def to_manga_public(manga: Manga) -> MangaPublic:
        if manga.id is None:
            raise RuntimeError("Cannot expose a manga without an ID")

        manga = manga.sanitize()
        return MangaPublic(
            id=manga.id,
            name=manga.name,
            price=manga.price,
            is_active=manga.is_active,
            owner_id=manga.owner_id,
            created_at=manga.created_at,
            updated_at=manga.updated_at,
        )

    @staticmethod
    def to_manga_page(result: PaginatedResult[Manga]) -> PaginatedResult[MangaPublic]:
        return PaginatedResult[MangaPublic](
            data=[DtoMapper.to_manga_public(manga) for manga in result.data],
            pagination=result.pagination,
        )
