"""Catalog table models, imported here so they register on SQLModel.metadata."""

from catalog.models.author import Author
from catalog.models.book import Book, BookGenreLink
from catalog.models.genre import Genre

__all__ = ["Author", "Book", "BookGenreLink", "Genre"]
