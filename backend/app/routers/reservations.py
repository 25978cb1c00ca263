from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.errors import ErrorKind, GENERIC_ERROR_MESSAGE, ReservationError
from backend.app.db.session import get_session
from backend.app.routers.schemas import ReservationIn, ReservationSentOut
from backend.app.services.reservations import submit_reservation


SUCCESS_MESSAGE = "Reservation sent successfully!"

router = APIRouter()


@router.post("/reservation/send", response_model=ReservationSentOut)
async def send_reservation(
    payload: ReservationIn | None = None,
    session: AsyncSession = Depends(get_session),
) -> ReservationSentOut:
    try:
        async with session.begin():
            reservation = await submit_reservation(session, payload or ReservationIn())
    except (SQLAlchemyError, OSError) as exc:
        raise ReservationError(ErrorKind.PERSISTENCE, GENERIC_ERROR_MESSAGE) from exc

    logger.info(f"Reservation stored for {reservation.date} at {reservation.time}")
    return ReservationSentOut(success=True, message=SUCCESS_MESSAGE)
