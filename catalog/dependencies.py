"""
Dependency injection configuration for FastAPI.

Every repository dependency opens its own database session
(``use_cache=False``), so repositories injected into the same handler can
be queried concurrently with gather_named().

Example:
    ```python
    from catalog.dependencies import BookRepoDep, GenreRepoDep

    @router.get("/genre/{genre_id}")
    async def genre_detail(
        genre_id: int, genre_repo: GenreRepoDep, book_repo: BookRepoDep
    ) -> HTMLResponse:
        detail = await GetGenreDetailCommand(genre_repo, book_repo).execute(
            genre_id
        )
        ...
    ```
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.repositories.genre_repository import GenreRepository
from catalog.storage.db import get_session

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session, use_cache=False)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_genre_repository(session: SessionDep) -> GenreRepository:
    """Get genre repository bound to its own database session."""
    return GenreRepository(session)


def get_author_repository(session: SessionDep) -> AuthorRepository:
    """Get author repository bound to its own database session."""
    return AuthorRepository(session)


def get_book_repository(session: SessionDep) -> BookRepository:
    """Get book repository bound to its own database session."""
    return BookRepository(session)


GenreRepoDep = Annotated[GenreRepository, Depends(get_genre_repository)]
AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
BookRepoDep = Annotated[BookRepository, Depends(get_book_repository)]
