"""Application configuration pulled from environment variables via pydantic."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")

DEFAULT_BASE_URL = "https://swapi.dev/api/"


class Settings(BaseSettings):
    """Environment-driven configuration for the SWAPI digest service."""
    model_config = SettingsConfigDict(env_prefix="SWAPI_", extra="ignore")

    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = Field(default=5000, gt=0)
    debug: bool = True
    verify_tls: bool = True
    omit_falsy_fields: bool = True  # hide 0 / "" fields in detail blocks
    host: str = "0.0.0.0"
    log_level: str = "INFO"

    @field_validator("base_url", mode="after")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Resource paths are appended directly, so the base must end with '/'."""
        return str(v).rstrip("/") + "/"


settings = Settings()


if __name__ == "__main__":
    logger.logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4)}")
