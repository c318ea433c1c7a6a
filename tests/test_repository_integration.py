import pytest
import pytest_asyncio

from manga_catalog.domain.exceptions import ConflictError
from manga_catalog.domain.models.manga import Manga as DomainManga
from manga_catalog.domain.models.manga import MangaFilter
from manga_catalog.domain.models.user import User as DomainUser
from manga_catalog.infrastructure.adapters.repositories.sqlalchemy_manga_repository import (
    SQLAlchemyMangaRepository,
)
from manga_catalog.infrastructure.adapters.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)

from .conftest import BaseIntegrationTest


class TestSQLAlchemyUserRepository(BaseIntegrationTest):
    """Integration tests for SQLAlchemy user repository"""

    @pytest.fixture
    def user_repository(self, test_session):
        return SQLAlchemyUserRepository(test_session)

    @pytest.mark.asyncio
    async def test_create_user(self, user_repository):
        created_user = await user_repository.create(
            DomainUser(name="testuser", email="test@example.com", password_hash="hash")
        )

        assert created_user.id is not None
        assert created_user.name == "testuser"
        assert created_user.password_hash == "hash"
        assert created_user.created_at is not None
        assert created_user.deleted_at is None

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, user_repository):
        await user_repository.create(DomainUser(name="a", email="same@example.com", password_hash="hash"))

        with pytest.raises(ConflictError):
            await user_repository.create(DomainUser(name="b", email="same@example.com", password_hash="hash"))

    @pytest.mark.asyncio
    async def test_get_by_email(self, user_repository):
        await user_repository.create(DomainUser(name="finder", email="find@example.com", password_hash="hash"))

        found = await user_repository.get_by_email("find@example.com")

        assert found is not None
        assert found.name == "finder"
        assert await user_repository.get_by_email("missing@example.com") is None

    @pytest.mark.asyncio
    async def test_get_all_and_count_are_paginated(self, user_repository):
        for i in range(5):
            await user_repository.create(DomainUser(name=f"user{i}", email=f"user{i}@example.com", password_hash="h"))

        page = await user_repository.get_all(offset=2, limit=2)

        assert await user_repository.count() == 5
        assert [user.name for user in page] == ["user2", "user3"]

    @pytest.mark.asyncio
    async def test_update_user(self, user_repository):
        created_user = await user_repository.create(
            DomainUser(name="updateuser", email="update@example.com", password_hash="hash")
        )

        updated_user = await user_repository.update(created_user.model_copy(update={"name": "updateduser"}))

        assert updated_user.name == "updateduser"
        assert updated_user.id == created_user.id
        assert updated_user.password_hash == "hash"

    @pytest.mark.asyncio
    async def test_soft_deleted_user_disappears(self, user_repository):
        created_user = await user_repository.create(
            DomainUser(name="deleteuser", email="delete@example.com", password_hash="hash")
        )

        assert await user_repository.delete(created_user.id) is True

        assert await user_repository.get_by_id(created_user.id) is None
        assert await user_repository.get_by_email("delete@example.com") is None
        assert await user_repository.count() == 0
        assert await user_repository.delete(created_user.id) is False


class TestSQLAlchemyMangaRepository(BaseIntegrationTest):
    """Integration tests for the catalog queries"""

    @pytest_asyncio.fixture
    async def owners(self, test_session):
        user_repository = SQLAlchemyUserRepository(test_session)
        first = await user_repository.create(DomainUser(name="one", email="one@example.com", password_hash="h"))
        second = await user_repository.create(DomainUser(name="two", email="two@example.com", password_hash="h"))
        return first, second

    @pytest.fixture
    def manga_repository(self, test_session):
        return SQLAlchemyMangaRepository(test_session)

    @pytest_asyncio.fixture
    async def catalog(self, manga_repository, owners):
        """25 mangas priced 1..25; even prices are inactive, the first ten belong to the first owner"""
        first, second = owners
        mangas = []
        for i in range(1, 26):
            mangas.append(
                await manga_repository.create(
                    DomainManga(
                        name=f"manga {i}",
                        price=float(i),
                        is_active=i % 2 == 1,
                        owner_id=first.id if i <= 10 else second.id,
                    )
                )
            )
        return mangas

    @pytest.mark.asyncio
    async def test_pages_are_ordered_by_id(self, manga_repository, catalog):
        first_page = await manga_repository.find(MangaFilter(), offset=0, limit=10)
        last_page = await manga_repository.find(MangaFilter(), offset=20, limit=10)

        assert await manga_repository.count(MangaFilter()) == 25
        assert [manga.id for manga in first_page] == [manga.id for manga in catalog[:10]]
        assert len(last_page) == 5

    @pytest.mark.asyncio
    async def test_offset_past_the_end_is_empty(self, manga_repository, catalog):
        assert await manga_repository.find(MangaFilter(), offset=9980, limit=10) == []

    @pytest.mark.asyncio
    async def test_active_only(self, manga_repository, catalog):
        active = await manga_repository.find(MangaFilter(active_only=True), limit=100)

        assert await manga_repository.count(MangaFilter(active_only=True)) == 13
        assert all(manga.is_active for manga in active)

    @pytest.mark.asyncio
    async def test_price_bounds_are_inclusive(self, manga_repository, catalog):
        filters = MangaFilter(price_min=5, price_max=8)

        found = await manga_repository.find(filters)

        assert [manga.price for manga in found] == [5.0, 6.0, 7.0, 8.0]
        assert await manga_repository.count(filters) == 4

    @pytest.mark.asyncio
    async def test_open_ended_price_bound(self, manga_repository, catalog):
        assert await manga_repository.count(MangaFilter(price_min=20)) == 6
        assert await manga_repository.count(MangaFilter(price_max=3)) == 3

    @pytest.mark.asyncio
    async def test_inverted_price_range_matches_nothing(self, manga_repository, catalog):
        assert await manga_repository.count(MangaFilter(price_min=10, price_max=5)) == 0

    @pytest.mark.asyncio
    async def test_filters_combine(self, manga_repository, owners, catalog):
        first, _ = owners
        filters = MangaFilter(active_only=True, price_min=2, owner_id=first.id)

        found = await manga_repository.find(filters)

        assert [manga.price for manga in found] == [3.0, 5.0, 7.0, 9.0]
        assert await manga_repository.count(filters) == 4

    @pytest.mark.asyncio
    async def test_soft_deleted_manga_is_hidden_everywhere(self, manga_repository, catalog):
        target = catalog[0]

        assert await manga_repository.delete(target.id) is True

        assert await manga_repository.get_by_id(target.id) is None
        assert await manga_repository.count(MangaFilter()) == 24
        assert target.id not in [manga.id for manga in await manga_repository.find(MangaFilter(), limit=100)]
        assert await manga_repository.delete(target.id) is False

    @pytest.mark.asyncio
    async def test_update_manga(self, manga_repository, catalog):
        target = catalog[1]

        updated = await manga_repository.update(target.model_copy(update={"price": 99.0, "is_active": True}))

        assert updated.price == 99.0
        assert updated.is_active is True
        assert updated.owner_id == target.owner_id
