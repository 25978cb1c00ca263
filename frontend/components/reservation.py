from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx
from loguru import logger

from frontend.toast import Toaster

if TYPE_CHECKING:
    from frontend.router import Router


SEND_PATH = "/api/v1/reservation/send"
SUCCESS_PATH = "/success"

FALLBACK_ERROR_MESSAGE = "Something went wrong, please try again."
FALLBACK_SUCCESS_MESSAGE = "Reservation sent!"

# attribute name -> JSON key
FIELDS = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "phone": "phone",
    "date": "date",
    "time": "time",
}


@dataclass
class SubmitEvent:
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


def _json_body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class ReservationForm:
    """The reservation form: six text fields and a submit action.

    Field values are kept exactly as typed; the server does all validation.
    A successful submit clears the form and moves to the confirmation page,
    a failed one keeps every value so the visitor can fix and resend.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        toaster: Toaster,
        router: "Router",
        *,
        send_path: str = SEND_PATH,
    ):
        self.http_client = http_client
        self.toaster = toaster
        self.router = router
        self.send_path = send_path
        self.clear()

    def set_field(self, name: str, value: str) -> None:
        if name not in FIELDS:
            raise KeyError(f"Unknown reservation field {name!r}")
        setattr(self, name, value)

    def clear(self) -> None:
        for name in FIELDS:
            setattr(self, name, "")

    def payload(self) -> dict[str, str]:
        return {key: getattr(self, name) for name, key in FIELDS.items()}

    async def submit(self, event: SubmitEvent | None = None) -> bool:
        (event or SubmitEvent()).prevent_default()

        try:
            response = await self.http_client.post(self.send_path, json=self.payload())
        except httpx.HTTPError as exc:
            logger.warning(f"Reservation request failed: {exc!r}")
            self.toaster.error(FALLBACK_ERROR_MESSAGE)
            return False

        body = _json_body(response)
        if response.is_success and body.get("success") is True:
            self.toaster.success(body.get("message") or FALLBACK_SUCCESS_MESSAGE)
            self.clear()
            self.router.navigate(SUCCESS_PATH)
            return True

        self.toaster.error(body.get("message") or FALLBACK_ERROR_MESSAGE)
        return False
