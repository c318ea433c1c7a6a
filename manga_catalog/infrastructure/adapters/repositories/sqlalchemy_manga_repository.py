from typing import List, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from manga_catalog.domain.exceptions import NotFoundError, RepositoryError
from manga_catalog.domain.models.manga import Manga as DomainManga
from manga_catalog.domain.models.manga import MangaFilter
from manga_catalog.domain.ports.repositories.manga_repository import MangaRepository
from manga_catalog.infrastructure.persistence.models import Manga as SQLManga


class SQLAlchemyMangaRepository(MangaRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_manga: SQLManga) -> DomainManga:
        return DomainManga(
            id=sql_manga.id,
            name=sql_manga.name,
            price=sql_manga.price,
            is_active=sql_manga.is_active,
            owner_id=sql_manga.owner_id,
            created_at=sql_manga.created_at,
            updated_at=sql_manga.updated_at,
            deleted_at=sql_manga.deleted_at,
        )

    def _apply_filters(self, query: Select, filters: MangaFilter) -> Select:
        # Soft-deleted rows are never visible.
        query = query.where(SQLManga.deleted_at.is_(None))
        if filters.active_only:
            query = query.where(SQLManga.is_active.is_(True))
        if filters.price_min is not None:
            query = query.where(SQLManga.price >= filters.price_min)
        if filters.price_max is not None:
            query = query.where(SQLManga.price <= filters.price_max)
        if filters.owner_id is not None:
            query = query.where(SQLManga.owner_id == filters.owner_id)
        return query

    async def _get_sql_manga(self, manga_id: int) -> Optional[SQLManga]:
        query = self._apply_filters(select(SQLManga), MangaFilter()).where(SQLManga.id == manga_id)
        try:
            return await self.session.scalar(query)
        except SQLAlchemyError as e:
            raise RepositoryError("failed to get manga") from e

    async def _commit(self, failure: str) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(failure) from e

    async def create(self, manga: DomainManga) -> DomainManga:
        sql_manga = SQLManga(
            name=manga.name,
            price=manga.price,
            owner_id=manga.owner_id,
            is_active=manga.is_active,
        )
        self.session.add(sql_manga)
        await self._commit("failed to create manga")
        await self.session.refresh(sql_manga)
        return self._to_domain(sql_manga)

    async def get_by_id(self, manga_id: int) -> Optional[DomainManga]:
        sql_manga = await self._get_sql_manga(manga_id)
        return self._to_domain(sql_manga) if sql_manga else None

    async def count(self, filters: MangaFilter) -> int:
        query = self._apply_filters(select(func.count()).select_from(SQLManga), filters)
        try:
            total = await self.session.scalar(query)
        except SQLAlchemyError as e:
            raise RepositoryError("failed to count mangas") from e
        return total or 0

    async def find(self, filters: MangaFilter, offset: int = 0, limit: int = 10) -> List[DomainManga]:
        query = self._apply_filters(select(SQLManga), filters).order_by(SQLManga.id).offset(offset).limit(limit)
        try:
            sql_mangas = (await self.session.scalars(query)).all()
        except SQLAlchemyError as e:
            raise RepositoryError("failed to get paginated mangas") from e
        return [self._to_domain(sql_manga) for sql_manga in sql_mangas]

    async def update(self, manga: DomainManga) -> DomainManga:
        sql_manga = await self._get_sql_manga(manga.id)
        if not sql_manga:
            raise NotFoundError(f"manga with id {manga.id} not found")

        sql_manga.name = manga.name
        sql_manga.price = manga.price
        sql_manga.is_active = manga.is_active

        await self._commit("failed to update manga")
        await self.session.refresh(sql_manga)
        return self._to_domain(sql_manga)

    async def delete(self, manga_id: int) -> bool:
        sql_manga = await self._get_sql_manga(manga_id)
        if not sql_manga:
            return False

        sql_manga.deleted_at = func.now()
        await self._commit("failed to delete manga")
        await self.session.refresh(sql_manga)
        return True
