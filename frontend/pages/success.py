import asyncio
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from frontend.router import Router


HOME_PATH = "/"
COUNTDOWN_START = 10


class ViewState(str, Enum):
    IDLE = "idle"
    SUBMITTED = "submitted"
    REDIRECTED = "redirected"


class SuccessPage:
    """Confirmation page that sends the visitor home after a countdown.

    ``mount`` starts one asyncio task that decrements ``countdown`` every
    ``tick_seconds`` and navigates home after the last tick. ``go_home``
    navigates right away. Both that and ``unmount`` cancel the pending task,
    so navigation happens at most once and nothing runs after teardown.
    """

    def __init__(
        self,
        router: "Router",
        *,
        countdown: int = COUNTDOWN_START,
        tick_seconds: float = 1.0,
    ):
        self.router = router
        self.start = countdown
        self.countdown = countdown
        self.tick_seconds = tick_seconds
        self.state = ViewState.IDLE
        self._task: asyncio.Task | None = None

    @property
    def countdown_task(self) -> asyncio.Task | None:
        return self._task

    def mount(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as exc:
            raise RuntimeError(
                "SuccessPage needs a running event loop for its countdown; "
                "navigate to it from async code"
            ) from exc

        self.state = ViewState.SUBMITTED
        self.countdown = self.start
        self._task = loop.create_task(self._run_countdown())

    def unmount(self) -> None:
        self._cancel_countdown()
        if self.state is ViewState.SUBMITTED:
            self.state = ViewState.IDLE

    def go_home(self) -> None:
        self._cancel_countdown()
        self._redirect()

    async def _run_countdown(self) -> None:
        while self.countdown > 0:
            await asyncio.sleep(self.tick_seconds)
            self.countdown -= 1
        self._redirect()

    def _cancel_countdown(self) -> None:
        task = self._task
        # The countdown itself unmounts this page when it redirects
        if task is None or task.done() or task is asyncio.current_task():
            return
        task.cancel()

    def _redirect(self) -> None:
        if self.state is not ViewState.SUBMITTED:
            return
        self.state = ViewState.REDIRECTED
        logger.debug(f"Leaving confirmation page with {self.countdown} ticks left")
        self.router.navigate(HOME_PATH)
