from pydantic_settings import BaseSettings, SettingsConfigDict

SAFARI_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Safari/605.1.15"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    app_name: str = "Gift Planner"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # Auth (identity is asserted by the hosted auth provider in front of us)
    user_id_header: str = "X-User-Id"

    # Link previews
    preview_fetch_timeout_seconds: float = 12.0
    preview_user_agent: str = SAFARI_USER_AGENT
    preview_max_body_bytes: int = 1024 * 1024


settings = Settings()
