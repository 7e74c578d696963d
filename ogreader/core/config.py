from pydantic_settings import SettingsConfigDict, BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Reader settings loaded from environment variables."""

    # Reader behaviour
    ignore_specification_errors: bool = True
    mine_extra_information: bool = True
    mine_images: bool = False

    # Fetching settings
    fetch_timeout: int = 10
    fetch_user_agent: str = "Mozilla/5.0 (compatible; OpenGraphReader/1.0)"
    fetch_follow_redirects: bool = True
    fetch_max_redirects: int = 5
    max_html_size: int = 5_000_000  # bytes

    # Parsing
    html_parser_features: str = "lxml"

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env file if it exists
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
