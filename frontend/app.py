from dataclasses import dataclass

import httpx

from frontend.components.reservation import ReservationForm
from frontend.config import ClientSettings
from frontend.content import SiteContent, load_site_content
from frontend.pages.home import HomePage
from frontend.pages.not_found import NotFoundPage
from frontend.pages.success import SuccessPage
from frontend.router import Router
from frontend.toast import Toaster


@dataclass
class ClientApp:
    router: Router
    toaster: Toaster
    http_client: httpx.AsyncClient
    content: SiteContent

    async def aclose(self) -> None:
        self.router.close()
        await self.http_client.aclose()


def create_client(
    settings: ClientSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ClientApp:
    """Wire the pages, router and HTTP client, and open the home page."""
    settings = settings or ClientSettings()
    http_client = http_client or httpx.AsyncClient(base_url=settings.API_BASE_URL)
    toaster = Toaster(duration=settings.TOAST_SECONDS)
    content = load_site_content(settings.CONTENT_PATH)

    def home(router: Router) -> HomePage:
        form = ReservationForm(http_client, toaster, router, send_path=settings.reservation_send_path)
        return HomePage(router, form, content)

    def success(router: Router) -> SuccessPage:
        return SuccessPage(
            router,
            countdown=settings.REDIRECT_COUNTDOWN,
            tick_seconds=settings.REDIRECT_TICK_SECONDS,
        )

    router = Router(fallback=NotFoundPage)
    router.add_route("/", home)
    router.add_route("/success", success)
    router.navigate("/")

    return ClientApp(router=router, toaster=toaster, http_client=http_client, content=content)
