"""
Base model for all catalog tables with async relationship support.

All table models inherit from BaseModel, which mixes SQLAlchemy's AsyncAttrs
into SQLModel so lazy relationships can be awaited through
``instance.awaitable_attrs`` instead of raising MissingGreenlet.

Example:
    Eager loading (preferred):
        stmt = select(Book).options(selectinload(Book.genres))
        book = (await session.exec(stmt)).one()
        book.genres  # already loaded

    Lazy loading when needed:
        book = await session.get(Book, 1)
        genres = await book.awaitable_attrs.genres
"""

from typing import ClassVar

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel

from catalog.constants import CATALOG_PREFIX


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all catalog tables.

    Subclasses set ``url_segment`` to get a routable ``url`` virtual field
    built from the primary key.
    """

    url_segment: ClassVar[str] = ""

    @property
    def url(self) -> str:
        """Routable detail page URL for this record."""
        return f"{CATALOG_PREFIX}/{self.url_segment}/{self.id}"
