from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ORDER_ENDPOINT_URL: str = "http://localhost:9009/api/order"
    ORDER_TIMEOUT_SECONDS: float = 10.0
    ORDER_GATEWAY: str = "http"  # "http" or "mock"

    SESSION_COOKIE_NAME: str = "order_session"
    MAX_FORM_SESSIONS: int = 1000

    SHOP_NAME: str = "Bloom Pizza"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
