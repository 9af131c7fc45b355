"""
Repository for Book entity.

Book lookups are what the genre and author pages use to find dependent
records, so every query here loads relationships eagerly: lazy loading
is not available on an AsyncSession.
"""

from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.book import Book, BookGenreLink
from catalog.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Book)

    async def get_all_with_author(self) -> list[Book]:
        """
        Get all books ordered by title, with their author loaded.

        Returns:
            List of all books.
        """
        stmt = (
            select(Book)
            .options(selectinload(Book.author))
            .order_by(Book.title)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_detail(self, book_id: int) -> Book | None:
        """
        Get a single book with its author and genres loaded.

        Args:
            book_id: Primary key of the book.

        Returns:
            Book if found, None otherwise.
        """
        stmt = (
            select(Book)
            .where(Book.id == book_id)
            .options(selectinload(Book.author), selectinload(Book.genres))
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_genre(self, genre_id: int) -> list[Book]:
        """
        Get all books that reference a genre.

        Args:
            genre_id: Primary key of the genre.

        Returns:
            Books in the genre, ordered by title.
        """
        stmt = (
            select(Book)
            .join(BookGenreLink, BookGenreLink.book_id == Book.id)
            .where(BookGenreLink.genre_id == genre_id)
            .order_by(Book.title)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_author(self, author_id: int) -> list[Book]:
        """
        Get all books written by an author.

        Args:
            author_id: Primary key of the author.

        Returns:
            The author's books, ordered by title.
        """
        stmt = (
            select(Book)
            .where(Book.author_id == author_id)
            .order_by(Book.title)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
