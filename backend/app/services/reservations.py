from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.errors import ErrorKind, ReservationError
from backend.app.db.models import Reservation, ReservationRecord, schema_violation_message
from backend.app.routers.schemas import ReservationIn


INCOMPLETE_SUBMISSION_MESSAGE = "Please fill out the full reservation form!"

REQUIRED_FIELDS = ("first_name", "last_name", "email", "phone", "date", "time")


def check_complete(fields: ReservationIn) -> dict[str, str]:
    """Return the six field values, or fail if any is missing or empty."""
    values = fields.model_dump(include=set(REQUIRED_FIELDS))
    if any(not values.get(name) for name in REQUIRED_FIELDS):
        raise ReservationError(ErrorKind.INCOMPLETE_SUBMISSION, INCOMPLETE_SUBMISSION_MESSAGE)
    return values


async def submit_reservation(session: AsyncSession, fields: ReservationIn) -> Reservation:
    """Validate a submission and stage the new row on ``session``.

    The caller owns the transaction; nothing is added to the session unless
    both the presence check and the record constraints pass.
    """
    values = check_complete(fields)

    try:
        record = ReservationRecord(**values)
    except ValidationError as exc:
        raise ReservationError(ErrorKind.SCHEMA_VALIDATION, schema_violation_message(exc)) from exc

    reservation = record.to_row()
    session.add(reservation)
    await session.flush()
    return reservation
