"""
Form models for validating and sanitizing submitted catalog data.

Every free-text field is trimmed, checked and then HTML-escaped before it
reaches a repository. Validation failures are reported as a list of
FormErrorItem so the originating form can be re-rendered with messages
instead of raising.
"""

from datetime import date
from typing import Any, Mapping, TypeVar

from markupsafe import escape
from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from catalog.constants import GENRE_NAME_MIN_LENGTH, NAME_MAX_LENGTH

TForm = TypeVar("TForm", bound=BaseModel)


def sanitize(value: Any) -> str:
    """Trim surrounding whitespace and escape HTML special characters."""
    if value is None:
        return ""
    return str(escape(str(value).strip()))


class FormErrorItem(BaseModel):
    """A single validation message attached to a form field."""

    field: str
    msg: str


class GenreForm(BaseModel):
    """Submitted genre create/update form."""

    model_config = ConfigDict(str_strip_whitespace=True, validate_default=True)

    name: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if len(value) < GENRE_NAME_MIN_LENGTH:
            raise PydanticCustomError("genre_name", "Genre name required")
        # Length limit applies to the stored (escaped) value
        value = sanitize(value)
        if len(value) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "genre_name_too_long",
                f"Genre name must be at most {NAME_MAX_LENGTH} characters.",
            )
        return value


def _check_person_name(value: str, label: str) -> str:
    if not value:
        raise PydanticCustomError("name_required", f"{label} must be specified.")
    if len(value) > NAME_MAX_LENGTH:
        raise PydanticCustomError(
            "name_too_long",
            f"{label} must be at most {NAME_MAX_LENGTH} characters.",
        )
    if not value.isalnum():
        raise PydanticCustomError(
            "name_not_alphanumeric",
            f"{label} has non-alphanumeric characters.",
        )
    return sanitize(value)


def _parse_optional_date(value: Any, label: str) -> date | None:
    if value is None or isinstance(value, date):
        return value
    value = str(value).strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise PydanticCustomError("invalid_date", f"Invalid {label}")


class AuthorForm(BaseModel):
    """Submitted author create/update form."""

    model_config = ConfigDict(str_strip_whitespace=True, validate_default=True)

    first_name: str = ""
    family_name: str = ""
    date_of_birth: date | None = None
    date_of_death: date | None = None

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, value: str) -> str:
        return _check_person_name(value, "First name")

    @field_validator("family_name")
    @classmethod
    def validate_family_name(cls, value: str) -> str:
        return _check_person_name(value, "Family name")

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def parse_date_of_birth(cls, value: Any) -> date | None:
        return _parse_optional_date(value, "date of birth")

    @field_validator("date_of_death", mode="before")
    @classmethod
    def parse_date_of_death(cls, value: Any) -> date | None:
        return _parse_optional_date(value, "date of death")

    @model_validator(mode="after")
    def check_lifespan_order(self) -> "AuthorForm":
        if (
            self.date_of_birth
            and self.date_of_death
            and self.date_of_death < self.date_of_birth
        ):
            raise PydanticCustomError(
                "lifespan_order",
                "Date of death must not be before date of birth.",
            )
        return self


def validate_form(
    form_cls: type[TForm], data: Mapping[str, Any]
) -> tuple[TForm | None, list[FormErrorItem]]:
    """
    Validate submitted form data.

    Args:
        form_cls: Form model to validate against.
        data: Raw submitted field values.

    Returns:
        ``(form, [])`` on success, ``(None, errors)`` otherwise.
    """
    try:
        return form_cls.model_validate(dict(data)), []
    except PydanticValidationError as ex:
        errors = [
            FormErrorItem(
                field=".".join(str(part) for part in err["loc"]) or "__all__",
                msg=err["msg"],
            )
            for err in ex.errors()
        ]
        return None, errors


def parse_date_or_none(value: Any) -> date | None:
    """Best-effort date parse used when re-displaying a rejected form."""
    try:
        return _parse_optional_date(value, "date")
    except PydanticCustomError:
        return None
