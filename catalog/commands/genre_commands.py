"""
Commands for Genre business operations.

Detail and delete commands look up the genre and the books referencing it
concurrently; the two repositories must therefore be bound to different
database sessions.
"""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from catalog.commands.base import BaseCommand
from catalog.exceptions import NotFoundError
from catalog.logging import logger
from catalog.models.book import Book
from catalog.models.genre import Genre
from catalog.repositories.book_repository import BookRepository
from catalog.repositories.genre_repository import GenreRepository
from catalog.schemas.forms import GenreForm
from catalog.utils.parallel import gather_named

GENRE_NOT_FOUND = "Genre not found"


# ============================================================================
# Input/Output Models
# ============================================================================


class UpdateGenreInput(BaseModel):  # type: ignore[misc]
    """Input model for updating a genre."""

    id: int = Field(..., description="Genre ID to update")
    form: GenreForm = Field(..., description="Validated genre form")


@dataclass
class GenreDetail:
    """A genre together with the books that reference it."""

    genre: Genre
    genre_books: list[Book] = field(default_factory=list)


@dataclass
class CreateGenreResult:
    """Outcome of a create request: a new genre or the existing one."""

    genre: Genre
    created: bool


@dataclass
class DeleteGenreResult:
    """Outcome of a delete request."""

    deleted: bool
    genre: Genre
    genre_books: list[Book] = field(default_factory=list)


# ============================================================================
# Commands
# ============================================================================


class GetGenresCommand(BaseCommand[None, list[Genre]]):
    """Command to list all genres sorted by name."""

    def __init__(self, repository: GenreRepository):
        self.repository = repository

    async def execute(self, input_data: None = None) -> list[Genre]:
        return await self.repository.get_all(order_by="name")


class GetGenreDetailCommand(BaseCommand[int, GenreDetail]):
    """
    Command to load a genre and its books.

    Both lookups run concurrently and are awaited together.
    """

    def __init__(
        self,
        genre_repository: GenreRepository,
        book_repository: BookRepository,
    ):
        """
        Initialize command with repositories.

        Args:
            genre_repository: Genre repository for data access.
            book_repository: Book repository bound to a separate session.
        """
        self.genre_repository = genre_repository
        self.book_repository = book_repository

    async def execute(self, genre_id: int) -> GenreDetail:
        """
        Execute command to load the genre detail.

        Args:
            genre_id: ID of the genre to load.

        Returns:
            The genre and the books referencing it.

        Raises:
            NotFoundError: If the genre does not exist.
        """
        results = await gather_named(
            genre=self.genre_repository.get_by_id(genre_id),
            genre_books=self.book_repository.get_by_genre(genre_id),
        )
        if results["genre"] is None:
            raise NotFoundError(GENRE_NOT_FOUND)

        return GenreDetail(
            genre=results["genre"], genre_books=results["genre_books"]
        )


class CreateGenreCommand(BaseCommand[GenreForm, CreateGenreResult]):
    """
    Command to create a new genre.

    If a genre with the same name already exists, nothing is inserted and
    the existing genre is returned instead.
    """

    def __init__(self, repository: GenreRepository):
        self.repository = repository

    async def execute(self, input_data: GenreForm) -> CreateGenreResult:
        """
        Execute command to create a genre.

        Args:
            input_data: Validated, sanitized genre form.

        Returns:
            CreateGenreResult with ``created=False`` for a duplicate name.

        Example:
            ```python
            result = await command.execute(GenreForm(name="Fantasy"))
            redirect_to = result.genre.url
            ```
        """
        existing = await self.repository.get_by_name(input_data.name)
        if existing:
            logger.info(
                f"Genre '{input_data.name}' already exists with ID {existing.id}"
            )
            return CreateGenreResult(genre=existing, created=False)

        genre = await self.repository.create(Genre(name=input_data.name))
        await self.repository.commit()
        logger.info(f"Created genre '{genre.name}' with ID {genre.id}")
        return CreateGenreResult(genre=genre, created=True)


class UpdateGenreCommand(BaseCommand[UpdateGenreInput, Genre]):
    """Command to rename an existing genre."""

    def __init__(self, repository: GenreRepository):
        self.repository = repository

    async def execute(self, input_data: UpdateGenreInput) -> Genre:
        """
        Execute command to update a genre.

        Args:
            input_data: Genre ID and validated form.

        Returns:
            Updated genre.

        Raises:
            NotFoundError: If the genre does not exist.
        """
        genre = await self.repository.get_by_id(input_data.id)
        if not genre:
            raise NotFoundError(GENRE_NOT_FOUND)

        genre.name = input_data.form.name
        genre = await self.repository.update(genre)
        await self.repository.commit()
        return genre


class DeleteGenreCommand(BaseCommand[int, DeleteGenreResult]):
    """
    Command to delete a genre.

    Deletion is refused while any book still references the genre; the
    result then carries those books so the confirmation page can list
    them.
    """

    def __init__(
        self,
        genre_repository: GenreRepository,
        book_repository: BookRepository,
    ):
        self.genre_repository = genre_repository
        self.book_repository = book_repository

    async def execute(self, genre_id: int) -> DeleteGenreResult:
        """
        Execute command to delete a genre.

        Args:
            genre_id: ID of the genre to delete.

        Returns:
            DeleteGenreResult with ``deleted=False`` when books depend on it.

        Raises:
            NotFoundError: If the genre does not exist.
        """
        detail = await GetGenreDetailCommand(
            self.genre_repository, self.book_repository
        ).execute(genre_id)

        if detail.genre_books:
            logger.info(
                f"Refusing to delete genre {genre_id}: "
                f"{len(detail.genre_books)} book(s) still reference it"
            )
            return DeleteGenreResult(
                deleted=False,
                genre=detail.genre,
                genre_books=detail.genre_books,
            )

        await self.genre_repository.delete(detail.genre)
        await self.genre_repository.commit()
        logger.info(f"Deleted genre {genre_id}")
        return DeleteGenreResult(deleted=True, genre=detail.genre)


class GetGenreCommand(BaseCommand[int, Genre]):
    """Command to load a single genre for editing."""

    def __init__(self, repository: GenreRepository):
        self.repository = repository

    async def execute(self, genre_id: int) -> Genre:
        genre = await self.repository.get_by_id(genre_id)
        if genre is None:
            raise NotFoundError(GENRE_NOT_FOUND)
        return genre
