import asyncio

import httpx
import pytest

from frontend.app import create_client
from frontend.config import ClientSettings
from frontend.content import load_site_content
from frontend.pages.home import HomePage
from frontend.pages.success import SuccessPage
from frontend.router import Router
from frontend.toast import Toaster


def accept(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"success": True, "message": "Reservation sent successfully!"})


@pytest.mark.asyncio
async def test_client_round_trip_returns_home_with_empty_form():
    settings = ClientSettings(REDIRECT_TICK_SECONDS=0.001)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(accept), base_url="http://api.test")
    client = create_client(settings, http_client=http_client)
    try:
        home = client.router.current_page
        assert isinstance(home, HomePage)
        home.form.set_field("first_name", "John")

        assert await home.form.submit() is True

        success = client.router.current_page
        assert isinstance(success, SuccessPage)
        await success.countdown_task

        back_home = client.router.current_page
        assert isinstance(back_home, HomePage)
        assert back_home is not home
        assert back_home.form.first_name == ""
        assert client.router.history == ["/", "/success", "/"]
    finally:
        await client.aclose()


def test_site_content_loads_bundled_sections():
    content = load_site_content()

    assert [link.title for link in content.navbar_links][0] == "HOME"
    assert len(content.our_qualities) == 3
    assert content.dishes and content.team
    assert all(member.name for member in content.team)


def test_site_content_from_custom_file(tmp_path):
    path = tmp_path / "site.json"
    path.write_text(
        '{"data": [{"navbarLinks": [], "ourQualities": [], "dishes": [],'
        ' "team": [{"id": 1, "image": "/a.png", "name": "Ann", "designation": "CHEF"}]}]}',
        encoding="utf-8",
    )

    content = load_site_content(path)

    assert content.team[0].designation == "CHEF"
    assert content.about == ""


def test_toasts_expire_after_duration():
    now = [100.0]
    toaster = Toaster(duration=3.0, clock=lambda: now[0])

    toaster.success("Reservation sent successfully!")
    now[0] = 102.0
    toaster.error("Provide a valid email!")

    assert [toast.kind for toast in toaster.active()] == ["success", "error"]
    now[0] = 103.5
    assert [toast.message for toast in toaster.active()] == ["Provide a valid email!"]
    now[0] = 106.0
    assert toaster.active() == []


@pytest.mark.asyncio
async def test_closing_client_stops_pending_countdown():
    settings = ClientSettings(REDIRECT_TICK_SECONDS=0.01)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(accept), base_url="http://api.test")
    client = create_client(settings, http_client=http_client)

    home = client.router.current_page
    assert await home.form.submit() is True
    success = client.router.current_page
    assert isinstance(success, SuccessPage)

    await client.aclose()
    await asyncio.sleep(0.3)

    assert client.router.history == ["/", "/success"]
    assert client.router.current_page is None
    assert success.countdown_task.cancelled()
    assert http_client.is_closed


def test_expired_toasts_are_dropped():
    now = [0.0]
    toaster = Toaster(duration=1.0, clock=lambda: now[0])

    for second in range(5):
        now[0] = float(second * 2)
        toaster.error(f"attempt {second}")

    assert [toast.message for toast in toaster.toasts] == ["attempt 4"]
    now[0] = 20.0
    assert toaster.active() == []
    assert toaster.toasts == []


def test_confirmation_requires_running_loop():
    router = Router()
    router.add_route("/success", SuccessPage)

    with pytest.raises(RuntimeError, match="running event loop"):
        router.navigate("/success")
