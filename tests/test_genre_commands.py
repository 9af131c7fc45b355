"""
Tests for Genre commands.

Commands are exercised against mocked repositories, so these tests cover
business rules only: deduplication on create, not-found handling and the
delete guard.
"""

import pytest

from catalog.commands.genre_commands import (
    GENRE_NOT_FOUND,
    CreateGenreCommand,
    DeleteGenreCommand,
    GetGenreCommand,
    GetGenreDetailCommand,
    GetGenresCommand,
    UpdateGenreCommand,
    UpdateGenreInput,
)
from catalog.exceptions import NotFoundError
from catalog.models.genre import Genre
from catalog.schemas.forms import GenreForm


class TestGetGenresCommand:
    """Tests for GetGenresCommand."""

    @pytest.mark.asyncio
    async def test_lists_genres_by_name(self, genre_repo, genre):
        genre_repo.get_all.return_value = [genre]

        result = await GetGenresCommand(genre_repo).execute()

        assert result == [genre]
        genre_repo.get_all.assert_called_once_with(order_by="name")


class TestGetGenreDetailCommand:
    """Tests for GetGenreDetailCommand."""

    @pytest.mark.asyncio
    async def test_returns_genre_and_books(
        self, genre_repo, book_repo, genre, book
    ):
        genre_repo.get_by_id.return_value = genre
        book_repo.get_by_genre.return_value = [book]

        detail = await GetGenreDetailCommand(genre_repo, book_repo).execute(1)

        assert detail.genre is genre
        assert detail.genre_books == [book]
        genre_repo.get_by_id.assert_called_once_with(1)
        book_repo.get_by_genre.assert_called_once_with(1)

    @pytest.mark.asyncio
    async def test_missing_genre_raises(self, genre_repo, book_repo):
        with pytest.raises(NotFoundError) as exc_info:
            await GetGenreDetailCommand(genre_repo, book_repo).execute(99)

        assert exc_info.value.message == GENRE_NOT_FOUND
        assert exc_info.value.http_status == 404


class TestCreateGenreCommand:
    """Tests for CreateGenreCommand."""

    @pytest.mark.asyncio
    async def test_creates_new_genre(self, genre_repo):
        genre_repo.create.return_value = Genre(id=5, name="Poetry")

        result = await CreateGenreCommand(genre_repo).execute(
            GenreForm(name="Poetry")
        )

        assert result.created is True
        assert result.genre.id == 5
        created = genre_repo.create.call_args.args[0]
        assert isinstance(created, Genre)
        assert created.name == "Poetry"
        genre_repo.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_duplicate_name_returns_existing(self, genre_repo, genre):
        genre_repo.get_by_name.return_value = genre

        result = await CreateGenreCommand(genre_repo).execute(
            GenreForm(name="Fantasy")
        )

        assert result.created is False
        assert result.genre is genre
        genre_repo.get_by_name.assert_called_once_with("Fantasy")
        genre_repo.create.assert_not_called()
        genre_repo.commit.assert_not_awaited()


class TestUpdateGenreCommand:
    """Tests for UpdateGenreCommand."""

    @pytest.mark.asyncio
    async def test_renames_genre(self, genre_repo, genre):
        genre_repo.get_by_id.return_value = genre
        genre_repo.update.return_value = genre

        result = await UpdateGenreCommand(genre_repo).execute(
            UpdateGenreInput(id=1, form=GenreForm(name="High Fantasy"))
        )

        assert result.name == "High Fantasy"
        assert result.id == 1
        genre_repo.update.assert_called_once_with(genre)
        genre_repo.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_genre_raises(self, genre_repo):
        with pytest.raises(NotFoundError):
            await UpdateGenreCommand(genre_repo).execute(
                UpdateGenreInput(id=99, form=GenreForm(name="Poetry"))
            )

        genre_repo.update.assert_not_called()


class TestDeleteGenreCommand:
    """Tests for DeleteGenreCommand."""

    @pytest.mark.asyncio
    async def test_deletes_unused_genre(self, genre_repo, book_repo, genre):
        genre_repo.get_by_id.return_value = genre

        result = await DeleteGenreCommand(genre_repo, book_repo).execute(1)

        assert result.deleted is True
        genre_repo.delete.assert_called_once_with(genre)
        genre_repo.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_refuses_while_books_reference_genre(
        self, genre_repo, book_repo, genre, book
    ):
        genre_repo.get_by_id.return_value = genre
        book_repo.get_by_genre.return_value = [book]

        result = await DeleteGenreCommand(genre_repo, book_repo).execute(1)

        assert result.deleted is False
        assert result.genre_books == [book]
        genre_repo.delete.assert_not_called()
        genre_repo.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_genre_raises(self, genre_repo, book_repo):
        with pytest.raises(NotFoundError):
            await DeleteGenreCommand(genre_repo, book_repo).execute(99)

        genre_repo.delete.assert_not_called()


class TestGetGenreCommand:
    """Tests for GetGenreCommand."""

    @pytest.mark.asyncio
    async def test_returns_genre(self, genre_repo, genre):
        genre_repo.get_by_id.return_value = genre

        assert await GetGenreCommand(genre_repo).execute(1) is genre

    @pytest.mark.asyncio
    async def test_missing_genre_raises(self, genre_repo):
        with pytest.raises(NotFoundError):
            await GetGenreCommand(genre_repo).execute(99)
