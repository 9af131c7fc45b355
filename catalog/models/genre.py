from typing import ClassVar

from sqlmodel import Field

from catalog.constants import NAME_MAX_LENGTH
from catalog.models.base import BaseModel


class Genre(BaseModel, table=True):
    """
    A book category such as "Fantasy" or "Poetry".

    Names are unique by convention only: the create flow looks for an
    existing genre with the same name before inserting, the schema does
    not enforce it.

    Attributes:
        id: Primary key identifier for the genre
        name: Display name of the genre
    """

    __table_args__ = {"extend_existing": True}

    url_segment: ClassVar[str] = "genre"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=NAME_MAX_LENGTH, index=True)
