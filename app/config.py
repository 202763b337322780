from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Hero Slider Admin"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Database settings
    database_url: str

    # Security settings
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # CORS settings
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # i18n settings (fallback track set when no language rows exist)
    default_language: str = "tr"
    supported_languages: list[str] = ["tr", "en"]

    # Hero slider settings
    public_slider_limit: int = 5
    admin_page_limit_max: int = 100

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = False

    # Admin console client
    admin_api_base_url: str = "http://localhost:8000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
