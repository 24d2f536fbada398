from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "RestaurantOS"
    VERSION: str = "0.1.0"

    # In-memory database, lives as long as the process
    DATABASE_URL: str = "sqlite+aiosqlite:///:memory:"
    DATABASE_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    SEED_DEMO_DATA: bool = True
    # False restores "any status from any status"
    STRICT_STATUS_TRANSITIONS: bool = True

    KITCHEN_POLL_SECONDS: int = 15
    DASHBOARD_POLL_SECONDS: int = 30
    URGENT_ORDER_MINUTES: int = 30

    PUBLIC_BASE_URL: str = "http://localhost:5173"
    QR_SERVICE_URL: str = "https://api.qrserver.com/v1/create-qr-code/"

    EVENT_QUEUE_SIZE: int = 100
    WS_KEEPALIVE_SECONDS: float = 30.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
