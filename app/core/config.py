# File: /app/core/config.py | Version: 2.0 | Title: Central App Settings (Pydantic v2)
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- Database ---
    DATABASE_URL: str = "sqlite:///./app.db"

    # --- Security / JWT ---
    SECRET_KEY: str = "CHANGE_ME_FOR_DEV_ONLY"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # --- Request handling ---
    REQUEST_TIMEOUT_SECONDS: float = 10.0
    DEFAULT_PHONE_REGION: str = "US"  # used when a phone number has no +country prefix

    # --- API behavior toggles ---
    ENABLE_STD_ERRORS: bool = True  # render framework errors in the users envelope

    # v2-style config
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
