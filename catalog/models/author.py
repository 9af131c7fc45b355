from datetime import date
from typing import ClassVar

from sqlmodel import Field

from catalog.constants import (
    DATE_INPUT_FORMAT,
    LIFESPAN_SEPARATOR,
    NAME_MAX_LENGTH,
)
from catalog.models.base import BaseModel


def format_medium_date(value: date) -> str:
    """
    Format a date in the medium locale style, e.g. ``Oct 14, 1983``.

    The day is not zero-padded, unlike ``%d``.
    """
    return f"{value:%b} {value.day}, {value.year}"


class Author(BaseModel, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    The ``name``, ``lifespan``, ``url`` and ``date_*_input`` attributes are
    read-only presentation fields computed from the stored columns; they
    are never persisted.

    Attributes:
        id: Primary key identifier for the author
        first_name: Given name
        family_name: Surname
        date_of_birth: Optional date of birth
        date_of_death: Optional date of death
    """

    __table_args__ = {"extend_existing": True}

    url_segment: ClassVar[str] = "author"

    id: int | None = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=NAME_MAX_LENGTH)
    family_name: str = Field(max_length=NAME_MAX_LENGTH, index=True)
    date_of_birth: date | None = None
    date_of_death: date | None = None

    @property
    def name(self) -> str:
        """Full name, given name first."""
        return f"{self.first_name} {self.family_name}"

    @property
    def lifespan(self) -> str:
        """
        Human-readable life span.

        Returns ``"<birth> - <death>"`` when both dates are known, the
        birth date alone while the author is alive (no trailing
        separator), ``"- <death>"`` when only the death date is known and
        an empty string when neither is.
        """
        birth = (
            format_medium_date(self.date_of_birth)
            if self.date_of_birth
            else ""
        )
        if not self.date_of_death:
            return birth
        death = format_medium_date(self.date_of_death)
        return f"{birth}{LIFESPAN_SEPARATOR}{death}".strip()

    @property
    def date_of_birth_input(self) -> str:
        """Date of birth formatted for an ``<input type="date">``."""
        return _date_input(self.date_of_birth)

    @property
    def date_of_death_input(self) -> str:
        """Date of death formatted for an ``<input type="date">``."""
        return _date_input(self.date_of_death)


def _date_input(value: date | None) -> str:
    return value.strftime(DATE_INPUT_FORMAT) if value else ""
