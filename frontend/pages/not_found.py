from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from frontend.router import Router


class NotFoundPage:
    def __init__(self, router: "Router"):
        self.router = router

    def mount(self) -> None:
        pass

    def unmount(self) -> None:
        pass

    def go_home(self) -> None:
        self.router.navigate("/")
