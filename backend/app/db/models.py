from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, ValidationError
from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 30
PHONE_LENGTH = 10


class Base(DeclarativeBase):
    pass


class Reservation(Base):
    __tablename__ = "reservation"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    last_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    phone: Mapped[str] = mapped_column(String(PHONE_LENGTH), nullable=False)
    # Free text as typed by the visitor
    date: Mapped[str] = mapped_column(Text, nullable=False)
    time: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class ReservationRecord(BaseModel):
    """Field constraints every stored reservation satisfies.

    Checked right before insert, independently of the presence check done on
    the request. Phone content is only length-checked.
    """

    first_name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: EmailStr
    phone: str = Field(min_length=PHONE_LENGTH, max_length=PHONE_LENGTH)
    date: str
    time: str

    def to_row(self) -> Reservation:
        return Reservation(**self.model_dump())


FIELD_LABELS = {
    "first_name": "First name",
    "last_name": "Last name",
    "email": "Email",
    "phone": "Phone number",
    "date": "Date",
    "time": "Time",
}


def schema_violation_message(exc: ValidationError) -> str:
    """Turn the first pydantic error into a sentence a visitor can act on."""
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else ""
    label = FIELD_LABELS.get(field, field or "Value")
    ctx = error.get("ctx") or {}

    if field == "email":
        return "Provide a valid email!"
    if field == "phone":
        return f"Phone number must contain exactly {PHONE_LENGTH} characters!"
    if error["type"] == "string_too_short":
        return f"{label} must contain at least {ctx.get('min_length', NAME_MIN_LENGTH)} characters!"
    if error["type"] == "string_too_long":
        return f"{label} cannot exceed {ctx.get('max_length', NAME_MAX_LENGTH)} characters!"
    return f"{label}: {error['msg']}"
