from typing import TYPE_CHECKING

from frontend.components.reservation import ReservationForm
from frontend.content import SiteContent

if TYPE_CHECKING:
    from frontend.router import Router


class HomePage:
    """Landing page: static sections plus the reservation form."""

    def __init__(self, router: "Router", form: ReservationForm, content: SiteContent):
        self.router = router
        self.form = form
        self.content = content

    def mount(self) -> None:
        pass

    def unmount(self) -> None:
        pass
