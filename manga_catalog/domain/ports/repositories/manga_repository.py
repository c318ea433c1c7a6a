from abc import ABC, abstractmethod
from typing import List, Optional

from manga_catalog.domain.models.manga import Manga, MangaFilter


class MangaRepository(ABC):
    @abstractmethod
    async def create(self, manga: Manga) -> Manga:
        pass

    @abstractmethod
    async def get_by_id(self, manga_id: int) -> Optional[Manga]:
        pass

    @abstractmethod
    async def count(self, filters: MangaFilter) -> int:
        pass

    @abstractmethod
    async def find(self, filters: MangaFilter, offset: int = 0, limit: int = 10) -> List[Manga]:
        pass

    @abstractmethod
    async def update(self, manga: Manga) -> Manga:
        pass

    @abstractmethod
    async def delete(self, manga_id: int) -> bool:
        pass
