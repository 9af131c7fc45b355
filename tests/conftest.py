"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for model instances, mocked
repositories and a TestClient wired to them.
"""

import os

import pytest

# Set required environment variables for testing before importing catalog modules
os.environ.setdefault("DB_USER", "test-user")
os.environ.setdefault("DB_PASSWORD", "test-password")
os.environ.setdefault("DB_HOST", "localhost")


@pytest.fixture
def mock_session():
    """
    Provides a mock AsyncSession for testing.

    Returns:
        AsyncMock: Mocked database session
    """
    from unittest.mock import AsyncMock, MagicMock

    from sqlmodel.ext.asyncio.session import AsyncSession

    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.exec = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    return session


@pytest.fixture
def genre():
    """Provides a stored Genre."""
    from catalog.models.genre import Genre

    return Genre(id=1, name="Fantasy")


@pytest.fixture
def author():
    """Provides a stored, deceased Author."""
    from datetime import date

    from catalog.models.author import Author

    return Author(
        id=3,
        first_name="Isaac",
        family_name="Asimov",
        date_of_birth=date(1920, 1, 2),
        date_of_death=date(1992, 4, 6),
    )


@pytest.fixture
def book(author, genre):
    """Provides a stored Book by ``author`` in ``genre``."""
    from catalog.models.book import Book

    book = Book(
        id=10,
        title="The Gods Themselves",
        summary="An energy pump between parallel universes.",
        isbn="9780553288100",
        author_id=author.id,
    )
    book.author = author
    book.genres = [genre]
    return book


@pytest.fixture
def genre_repo():
    """Provides a mocked GenreRepository."""
    from tests.mocks.repository_mocks import create_mock_genre_repository

    return create_mock_genre_repository()


@pytest.fixture
def author_repo():
    """Provides a mocked AuthorRepository."""
    from tests.mocks.repository_mocks import create_mock_author_repository

    return create_mock_author_repository()


@pytest.fixture
def book_repo():
    """Provides a mocked BookRepository."""
    from tests.mocks.repository_mocks import create_mock_book_repository

    return create_mock_book_repository()


@pytest.fixture
def app(genre_repo, author_repo, book_repo):
    """
    Provides the full application with repositories overridden by mocks.

    The startup handler is never run (the client is not used as a context
    manager), so no database is required.
    """
    from catalog import application
    from catalog.dependencies import (
        get_author_repository,
        get_book_repository,
        get_genre_repository,
    )

    test_app = application()
    test_app.dependency_overrides[get_genre_repository] = lambda: genre_repo
    test_app.dependency_overrides[get_author_repository] = lambda: author_repo
    test_app.dependency_overrides[get_book_repository] = lambda: book_repo
    return test_app


@pytest.fixture
def client(app):
    """
    Provides a TestClient that does not follow redirects.

    Returns:
        TestClient: FastAPI test client instance.
    """
    from fastapi.testclient import TestClient

    return TestClient(app, follow_redirects=False)
