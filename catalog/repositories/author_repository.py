"""
Repository for Author entity.

Example:
    ```python
    from catalog.repositories.author_repository import AuthorRepository
    from catalog.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        authors = await repo.get_all_sorted()
    ```
"""

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.author import Author
from catalog.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """Repository for Author entity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Author)

    async def get_all_sorted(self) -> list[Author]:
        """
        Get all authors ordered by family name, then first name.

        Returns:
            List of all authors.
        """
        stmt = select(Author).order_by(Author.family_name, Author.first_name)
        result = await self.session.exec(stmt)
        return list(result.all())
