"""Runtime configuration. Defaults can be overridden by CHESS_* environment variables (ex. CHESS_LOG_LEVEL=debug)."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.exceptions import InvalidRequestError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CHESS_")

    log_level: str = "WARNING"
    show_move_list: bool = True
    show_graveyard: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise InvalidRequestError(
                f"Unknown log level {value!r}. Pick one from {', '.join(LOG_LEVELS)}"
            )
        return level


settings = Settings()
