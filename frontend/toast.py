import time
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger


@dataclass(frozen=True)
class Toast:
    kind: str  # "success" or "error"
    message: str
    shown_at: float
    duration: float

    def expired(self, now: float) -> bool:
        return now >= self.shown_at + self.duration


class Toaster:
    """Collects transient notifications; each one is visible for ``duration`` seconds."""

    def __init__(self, duration: float = 3.0, clock: Callable[[], float] = time.monotonic):
        self.duration = duration
        self._clock = clock
        self.toasts: list[Toast] = []

    def _prune(self, now: float) -> None:
        self.toasts = [toast for toast in self.toasts if not toast.expired(now)]

    def _push(self, kind: str, message: str) -> Toast:
        now = self._clock()
        self._prune(now)
        toast = Toast(kind=kind, message=message, shown_at=now, duration=self.duration)
        self.toasts.append(toast)
        logger.debug(f"toast[{kind}] {message}")
        return toast

    def success(self, message: str) -> Toast:
        return self._push("success", message)

    def error(self, message: str) -> Toast:
        return self._push("error", message)

    def active(self, now: float | None = None) -> list[Toast]:
        self._prune(self._clock() if now is None else now)
        return list(self.toasts)

    @property
    def latest(self) -> Toast | None:
        return self.toasts[-1] if self.toasts else None
