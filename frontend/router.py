from collections.abc import Callable
from typing import Protocol

from loguru import logger


class Page(Protocol):
    def mount(self) -> None: ...

    def unmount(self) -> None: ...


PageFactory = Callable[["Router"], Page]


class Router:
    """Client-side navigation: one mounted page at a time."""

    def __init__(self, fallback: PageFactory | None = None):
        self.routes: dict[str, PageFactory] = {}
        self.fallback = fallback
        self.history: list[str] = []
        self.current_page: Page | None = None

    @property
    def current_path(self) -> str | None:
        return self.history[-1] if self.history else None

    def add_route(self, path: str, factory: PageFactory) -> None:
        self.routes[path] = factory

    def navigate(self, path: str) -> Page:
        factory = self.routes.get(path, self.fallback)
        if factory is None:
            raise KeyError(f"No page registered for {path!r}")

        # Tear down first so a page never acts after it has been left
        if self.current_page is not None:
            self.current_page.unmount()

        page = factory(self)
        self.history.append(path)
        self.current_page = page
        logger.debug(f"navigate -> {path}")
        page.mount()
        return page

    def close(self) -> None:
        """Unmount the current page; nothing it scheduled runs afterwards."""
        if self.current_page is not None:
            self.current_page.unmount()
            self.current_page = None
