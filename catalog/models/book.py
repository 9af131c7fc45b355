from typing import ClassVar

from sqlmodel import Field, Relationship

from catalog.models.author import Author
from catalog.models.base import BaseModel
from catalog.models.genre import Genre


class BookGenreLink(BaseModel, table=True):
    """Association table for the many-to-many Book <-> Genre relation."""

    __tablename__ = "book_genre_link"
    __table_args__ = {"extend_existing": True}

    book_id: int | None = Field(
        default=None, foreign_key="book.id", primary_key=True
    )
    genre_id: int | None = Field(
        default=None, foreign_key="genre.id", primary_key=True
    )


class Book(BaseModel, table=True):
    """
    A catalogued title.

    Books reference exactly one author and any number of genres; those
    references are what block deleting an author or a genre.

    Attributes:
        id: Primary key identifier for the book
        title: Book title
        summary: Short description
        isbn: ISBN-13 as entered
        author_id: Foreign key of the book's author
        author: The book's author (load eagerly in async code)
        genres: Genres the book belongs to (load eagerly in async code)
    """

    __table_args__ = {"extend_existing": True}

    url_segment: ClassVar[str] = "book"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    summary: str
    isbn: str = Field(max_length=32)
    author_id: int = Field(foreign_key="author.id", index=True)

    author: Author | None = Relationship()
    genres: list[Genre] = Relationship(link_model=BookGenreLink)
