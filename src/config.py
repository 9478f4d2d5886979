from pydantic_settings import BaseSettings

from src.models.currency import Currency


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    app_name: str = "Cash Flow Planner"
    debug: bool = False
    log_level: str = "INFO"

    # Display currency for formatted amounts (CLI output)
    currency: Currency = Currency.CZK

    # API
    cors_origins: list[str] = ["*"]


settings = Settings()
