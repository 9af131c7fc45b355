"""Commands for Book pages and the catalog home page."""

from dataclasses import dataclass

from catalog.commands.base import BaseCommand
from catalog.exceptions import NotFoundError
from catalog.models.book import Book
from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.repositories.genre_repository import GenreRepository
from catalog.utils.parallel import gather_named

BOOK_NOT_FOUND = "Book not found"


@dataclass
class CatalogCounts:
    """Record counts shown on the catalog home page."""

    book_count: int
    author_count: int
    genre_count: int


class GetBooksCommand(BaseCommand[None, list[Book]]):
    """Command to list all books sorted by title."""

    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def execute(self, input_data: None = None) -> list[Book]:
        return await self.repository.get_all_with_author()


class GetBookDetailCommand(BaseCommand[int, Book]):
    """Command to load one book with its author and genres."""

    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def execute(self, book_id: int) -> Book:
        """
        Execute command to load a book.

        Raises:
            NotFoundError: If the book does not exist.
        """
        book = await self.repository.get_detail(book_id)
        if book is None:
            raise NotFoundError(BOOK_NOT_FOUND)
        return book


class GetCatalogCountsCommand(BaseCommand[None, CatalogCounts]):
    """
    Command to count books, authors and genres.

    The three counts are independent and run concurrently, one session
    per repository.
    """

    def __init__(
        self,
        book_repository: BookRepository,
        author_repository: AuthorRepository,
        genre_repository: GenreRepository,
    ):
        self.book_repository = book_repository
        self.author_repository = author_repository
        self.genre_repository = genre_repository

    async def execute(self, input_data: None = None) -> CatalogCounts:
        results = await gather_named(
            book_count=self.book_repository.count(),
            author_count=self.author_repository.count(),
            genre_count=self.genre_repository.count(),
        )
        return CatalogCounts(**results)
