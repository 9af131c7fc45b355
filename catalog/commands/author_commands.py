"""
Commands for Author business operations.

Authors follow the same flows as genres, except that creating an author
never deduplicates: two people can share a name.
"""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from catalog.commands.base import BaseCommand
from catalog.exceptions import NotFoundError
from catalog.logging import logger
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.schemas.forms import AuthorForm
from catalog.utils.parallel import gather_named

AUTHOR_NOT_FOUND = "Author not found"


# ============================================================================
# Input/Output Models
# ============================================================================


class UpdateAuthorInput(BaseModel):  # type: ignore[misc]
    """Input model for updating an author."""

    id: int = Field(..., description="Author ID to update")
    form: AuthorForm = Field(..., description="Validated author form")


@dataclass
class AuthorDetail:
    """An author together with the books they wrote."""

    author: Author
    author_books: list[Book] = field(default_factory=list)


@dataclass
class DeleteAuthorResult:
    """Outcome of a delete request."""

    deleted: bool
    author: Author
    author_books: list[Book] = field(default_factory=list)


# ============================================================================
# Commands
# ============================================================================


class GetAuthorsCommand(BaseCommand[None, list[Author]]):
    """Command to list all authors sorted by family name."""

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, input_data: None = None) -> list[Author]:
        return await self.repository.get_all_sorted()


class GetAuthorDetailCommand(BaseCommand[int, AuthorDetail]):
    """Command to load an author and their books concurrently."""

    def __init__(
        self,
        author_repository: AuthorRepository,
        book_repository: BookRepository,
    ):
        self.author_repository = author_repository
        self.book_repository = book_repository

    async def execute(self, author_id: int) -> AuthorDetail:
        """
        Execute command to load the author detail.

        Raises:
            NotFoundError: If the author does not exist.
        """
        results = await gather_named(
            author=self.author_repository.get_by_id(author_id),
            author_books=self.book_repository.get_by_author(author_id),
        )
        if results["author"] is None:
            raise NotFoundError(AUTHOR_NOT_FOUND)

        return AuthorDetail(
            author=results["author"], author_books=results["author_books"]
        )


class CreateAuthorCommand(BaseCommand[AuthorForm, Author]):
    """Command to create a new author."""

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, input_data: AuthorForm) -> Author:
        author = await self.repository.create(
            Author(**input_data.model_dump())
        )
        await self.repository.commit()
        logger.info(f"Created author '{author.name}' with ID {author.id}")
        return author


class UpdateAuthorCommand(BaseCommand[UpdateAuthorInput, Author]):
    """Command to update an existing author."""

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, input_data: UpdateAuthorInput) -> Author:
        """
        Execute command to update an author.

        Args:
            input_data: Author ID and validated form.

        Returns:
            Updated author.

        Raises:
            NotFoundError: If the author does not exist.
        """
        author = await self.repository.get_by_id(input_data.id)
        if not author:
            raise NotFoundError(AUTHOR_NOT_FOUND)

        for key, value in input_data.form.model_dump().items():
            setattr(author, key, value)
        author = await self.repository.update(author)
        await self.repository.commit()
        return author


class DeleteAuthorCommand(BaseCommand[int, DeleteAuthorResult]):
    """
    Command to delete an author.

    Deletion is refused while any book still references the author.
    """

    def __init__(
        self,
        author_repository: AuthorRepository,
        book_repository: BookRepository,
    ):
        self.author_repository = author_repository
        self.book_repository = book_repository

    async def execute(self, author_id: int) -> DeleteAuthorResult:
        """
        Execute command to delete an author.

        Raises:
            NotFoundError: If the author does not exist.
        """
        detail = await GetAuthorDetailCommand(
            self.author_repository, self.book_repository
        ).execute(author_id)

        if detail.author_books:
            logger.info(
                f"Refusing to delete author {author_id}: "
                f"{len(detail.author_books)} book(s) still reference them"
            )
            return DeleteAuthorResult(
                deleted=False,
                author=detail.author,
                author_books=detail.author_books,
            )

        await self.author_repository.delete(detail.author)
        await self.author_repository.commit()
        logger.info(f"Deleted author {author_id}")
        return DeleteAuthorResult(deleted=True, author=detail.author)


class GetAuthorCommand(BaseCommand[int, Author]):
    """Command to load a single author for editing."""

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, author_id: int) -> Author:
        author = await self.repository.get_by_id(author_id)
        if author is None:
            raise NotFoundError(AUTHOR_NOT_FOUND)
        return author
