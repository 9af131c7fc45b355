"""
Tests for GenreRepository and the shared BaseRepository operations.

These tests verify that the repository correctly interacts with the
database session using mocks.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from catalog.models.genre import Genre
from catalog.repositories.genre_repository import GenreRepository


def exec_result(mock_session, *, rows=None, first=None, one=None):
    result = MagicMock()
    result.all.return_value = rows or []
    result.first.return_value = first
    result.one.return_value = one
    mock_session.exec.return_value = result
    return result


class TestGenreRepositoryWrite:
    """Tests for repository create, update and delete operations."""

    @pytest.mark.asyncio
    async def test_create_genre(self, mock_session):
        """Test creating a genre flushes and refreshes it."""
        repo = GenreRepository(mock_session)
        genre = Genre(name="Poetry")

        created = await repo.create(genre)

        assert created is genre
        mock_session.add.assert_called_once_with(genre)
        mock_session.flush.assert_called_once()
        mock_session.refresh.assert_called_once_with(genre)

    @pytest.mark.asyncio
    async def test_create_rolls_back_on_error(self, mock_session):
        """Test a failing flush rolls the session back and re-raises."""
        repo = GenreRepository(mock_session)
        mock_session.flush.side_effect = SQLAlchemyError("boom")

        with pytest.raises(SQLAlchemyError):
            await repo.create(Genre(name="Poetry"))

        mock_session.rollback.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_genre(self, mock_session, genre):
        repo = GenreRepository(mock_session)
        genre.name = "High Fantasy"

        updated = await repo.update(genre)

        assert updated.name == "High Fantasy"
        mock_session.add.assert_called_once_with(genre)
        mock_session.flush.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_genre(self, mock_session, genre):
        repo = GenreRepository(mock_session)

        await repo.delete(genre)

        mock_session.delete.assert_called_once_with(genre)
        mock_session.flush.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_rolls_back_on_error(self, mock_session, genre):
        repo = GenreRepository(mock_session)
        mock_session.delete.side_effect = SQLAlchemyError("boom")

        with pytest.raises(SQLAlchemyError):
            await repo.delete(genre)

        mock_session.rollback.assert_called_once()


class TestGenreRepositoryRead:
    """Tests for repository read operations."""

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, mock_session, genre):
        repo = GenreRepository(mock_session)
        mock_session.get.return_value = genre

        found = await repo.get_by_id(1)

        assert found is genre
        mock_session.get.assert_called_once_with(Genre, 1)

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, mock_session):
        repo = GenreRepository(mock_session)
        mock_session.get.return_value = None

        assert await repo.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_get_all_ordered(self, mock_session):
        repo = GenreRepository(mock_session)
        genres = [Genre(id=1, name="Fantasy"), Genre(id=2, name="Poetry")]
        exec_result(mock_session, rows=genres)

        result = await repo.get_all(order_by="name")

        assert result == genres
        stmt = mock_session.exec.call_args.args[0]
        assert "ORDER BY genre.name" in str(stmt)

    @pytest.mark.asyncio
    async def test_get_all_with_filter(self, mock_session):
        repo = GenreRepository(mock_session)
        exec_result(mock_session, rows=[])

        await repo.get_all(name="Poetry")

        stmt = mock_session.exec.call_args.args[0]
        assert "WHERE genre.name" in str(stmt)

    @pytest.mark.asyncio
    async def test_get_all_propagates_errors(self, mock_session):
        repo = GenreRepository(mock_session)
        mock_session.exec.side_effect = SQLAlchemyError("down")

        with pytest.raises(SQLAlchemyError):
            await repo.get_all()

    @pytest.mark.asyncio
    async def test_get_by_name(self, mock_session, genre):
        repo = GenreRepository(mock_session)
        exec_result(mock_session, first=genre)

        found = await repo.get_by_name("Fantasy")

        assert found is genre
        stmt = mock_session.exec.call_args.args[0]
        assert "WHERE genre.name" in str(stmt)

    @pytest.mark.asyncio
    async def test_count(self, mock_session):
        repo = GenreRepository(mock_session)
        exec_result(mock_session, one=4)

        assert await repo.count() == 4
        stmt = mock_session.exec.call_args.args[0]
        assert "count" in str(stmt).lower()

    @pytest.mark.asyncio
    async def test_commit(self, mock_session):
        repo = GenreRepository(mock_session)

        await repo.commit()

        mock_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_commit_rolls_back_on_error(self, mock_session):
        repo = GenreRepository(mock_session)
        mock_session.commit.side_effect = SQLAlchemyError("lost connection")

        with pytest.raises(SQLAlchemyError):
            await repo.commit()

        mock_session.rollback.assert_awaited_once()
