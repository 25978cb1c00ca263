from pydantic import BaseModel, ConfigDict, Field


class ReservationIn(BaseModel):
    # Every field is optional here; completeness is checked by the service so
    # a missing field gets the same answer as an empty one.
    model_config = ConfigDict(populate_by_name=True)

    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    phone: str | None = None
    date: str | None = None  # e.g. "2025-01-01", not parsed
    time: str | None = None  # e.g. "19:00", not parsed


class ReservationSentOut(BaseModel):
    success: bool = True
    message: str
