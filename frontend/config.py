from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Client settings sourced from CLIENT_* environment variables."""

    API_BASE_URL: str = "http://localhost:4000"
    API_PREFIX: str = "/api/v1"

    TOAST_SECONDS: float = 3.0

    # Confirmation page: ticks before returning home, and tick length
    REDIRECT_COUNTDOWN: int = 10
    REDIRECT_TICK_SECONDS: float = 1.0

    # Defaults to the bundled frontend/data/site.json
    CONTENT_PATH: str | None = None

    model_config = SettingsConfigDict(env_prefix="CLIENT_", env_file=".env", extra="ignore")

    @property
    def reservation_send_path(self) -> str:
        return f"{self.API_PREFIX}/reservation/send"
