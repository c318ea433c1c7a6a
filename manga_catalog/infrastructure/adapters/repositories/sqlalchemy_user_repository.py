from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from manga_catalog.domain.exceptions import ConflictError, NotFoundError, RepositoryError
from manga_catalog.domain.models.user import User as DomainUser
from manga_catalog.domain.ports.repositories.user_repository import UserRepository
from manga_catalog.infrastructure.persistence.models import User as SQLUser


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_user: SQLUser) -> DomainUser:
        return DomainUser(
            id=sql_user.id,
            name=sql_user.name,
            email=sql_user.email,
            password_hash=sql_user.password,
            created_at=sql_user.created_at,
            updated_at=sql_user.updated_at,
            deleted_at=sql_user.deleted_at,
        )

    def _live_users(self):
        return select(SQLUser).where(SQLUser.deleted_at.is_(None))

    async def _get_sql_user(self, user_id: int) -> Optional[SQLUser]:
        return await self.session.scalar(self._live_users().where(SQLUser.id == user_id))

    async def _commit(self, failure: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError("user with this email already exists") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(failure) from e

    async def create(self, user: DomainUser) -> DomainUser:
        sql_user = SQLUser(name=user.name, email=user.email, password=user.password_hash)
        self.session.add(sql_user)
        await self._commit("failed to create user")
        await self.session.refresh(sql_user)
        return self._to_domain(sql_user)

    async def get_by_id(self, user_id: int) -> Optional[DomainUser]:
        try:
            sql_user = await self._get_sql_user(user_id)
        except SQLAlchemyError as e:
            raise RepositoryError("failed to get user") from e
        return self._to_domain(sql_user) if sql_user else None

    async def get_by_email(self, email: str) -> Optional[DomainUser]:
        try:
            sql_user = await self.session.scalar(self._live_users().where(SQLUser.email == email))
        except SQLAlchemyError as e:
            raise RepositoryError("failed to get user") from e
        return self._to_domain(sql_user) if sql_user else None

    async def count(self) -> int:
        query = select(func.count()).select_from(SQLUser).where(SQLUser.deleted_at.is_(None))
        try:
            total = await self.session.scalar(query)
        except SQLAlchemyError as e:
            raise RepositoryError("failed to count users") from e
        return total or 0

    async def get_all(self, offset: int = 0, limit: int = 100) -> List[DomainUser]:
        query = self._live_users().order_by(SQLUser.id).offset(offset).limit(limit)
        try:
            sql_users = (await self.session.scalars(query)).all()
        except SQLAlchemyError as e:
            raise RepositoryError("failed to get users") from e
        return [self._to_domain(sql_user) for sql_user in sql_users]

    async def update(self, user: DomainUser) -> DomainUser:
        sql_user = await self._get_sql_user(user.id)
        if not sql_user:
            raise NotFoundError(f"user with id {user.id} not found")

        sql_user.name = user.name
        sql_user.email = user.email
        if user.password_hash:
            sql_user.password = user.password_hash

        await self._commit("failed to update user")
        await self.session.refresh(sql_user)
        return self._to_domain(sql_user)

    async def delete(self, user_id: int) -> bool:
        sql_user = await self._get_sql_user(user_id)
        if not sql_user:
            return False

        sql_user.deleted_at = func.now()
        await self._commit("failed to delete user")
        await self.session.refresh(sql_user)
        return True
