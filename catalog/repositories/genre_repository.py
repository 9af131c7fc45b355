"""
Repository for Genre entity.

Example:
    ```python
    from catalog.repositories.genre_repository import GenreRepository
    from catalog.storage.db import async_session

    async with async_session() as session:
        repo = GenreRepository(session)
        genres = await repo.get_all(order_by="name")
        poetry = await repo.get_by_name("Poetry")
    ```
"""

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.genre import Genre
from catalog.repositories.base import BaseRepository


class GenreRepository(BaseRepository[Genre]):
    """Repository for Genre entity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Genre)

    async def get_by_name(self, name: str) -> Genre | None:
        """
        Get genre by exact name match.

        Args:
            name: Exact (already sanitized) genre name.

        Returns:
            First genre with that name if any, None otherwise.
        """
        stmt = select(Genre).where(Genre.name == name)
        result = await self.session.exec(stmt)
        return result.first()
