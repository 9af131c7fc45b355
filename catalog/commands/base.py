"""
Base command for encapsulating business operations.

The Command pattern encapsulates business logic as objects, keeping HTTP
handlers down to "parse, execute, render" and making each use case easy to
test in isolation with mocked repositories.

Example:
    ```python
    class CreateGenreCommand(BaseCommand[GenreForm, CreateGenreResult]):
        def __init__(self, repository: GenreRepository):
            self.repository = repository

        async def execute(self, input_data: GenreForm) -> CreateGenreResult:
            existing = await self.repository.get_by_name(input_data.name)
            if existing:
                return CreateGenreResult(genre=existing, created=False)
            genre = await self.repository.create(Genre(name=input_data.name))
            return CreateGenreResult(genre=genre, created=True)


    # Usage in HTTP handler
    @router.post("/genre/create")
    async def genre_create_post(repo: GenreRepoDep, name: str = Form("")):
        form, errors = validate_form(GenreForm, {"name": name})
        ...
        result = await CreateGenreCommand(repo).execute(form)
        return RedirectResponse(result.genre.url, status_code=303)
    ```
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Commands depend on repositories for data access and raise
    catalog.exceptions.AppException subclasses for business errors.

    Type Parameters:
        TInput: Input data type (usually a form model or an id).
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            NotFoundError: When a referenced record does not exist.
            SQLAlchemyError: Propagated from repositories.
        """
        pass
