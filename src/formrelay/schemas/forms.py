"""Form submission Pydantic schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Position(str, Enum):
    """Positions offered on the careers form."""

    CHARTERED_ACCOUNTANT = "chartered_accountant"
    ARTICLESHIP = "articleship"
    OTHERS = "others"


POSITION_LABELS: dict[str, str] = {
    Position.CHARTERED_ACCOUNTANT.value: "Chartered Accountant",
    Position.ARTICLESHIP.value: "Articleship",
    Position.OTHERS.value: "Others",
}


def _blank_to_none(value: object) -> object:
    """Treat empty or whitespace-only strings as absent."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class CareerApplication(BaseModel):
    """Text fields of a job application."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    email: str
    phone: str
    # Free text so unknown codes pass through to the label formatter
    position: str
    message: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def strip_blank(cls, value: object) -> object:
        return _blank_to_none(value)


class ContactMessage(BaseModel):
    """Contact form inquiry."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    name: str
    email: str
    message: str
    phone: str | None = None
    subject: str | None = None
    preferred_contact: str | None = Field(default=None, alias="preferredContact")

    @field_validator("*", mode="before")
    @classmethod
    def strip_blank(cls, value: object) -> object:
        return _blank_to_none(value)


class Attachment(BaseModel):
    """File upload held entirely in memory."""

    filename: str
    content_type: str = "application/octet-stream"
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)
