from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./rawpasta.db"
    database_echo: bool = False

    # Общий секрет TOTP (base32), выдается вне системы
    totp_secret: str = ""
    totp_skew_ms: int = 30000
    totp_window: int = 1

    log_level: str = "info"
    timezone: str = "UTC"
    port: int = 3000
    app_version: str = "1.0.0"

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
