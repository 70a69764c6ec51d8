from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weekdate.weeks.weekdays import resolve_weekday


class Settings(BaseSettings):
    week_start: int = Field(default=1, validation_alias="WEEKDATE_WEEK_START")
    log_level: str = Field(default="INFO", validation_alias="WEEKDATE_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="WEEKDATE_LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("week_start", mode="before")
    @classmethod
    def validate_week_start(cls, value: object) -> int:
        """Accept a weekday name ("Sunday") or index (7) for the default week start."""
        week_start = resolve_weekday(value)
        if value != week_start:
            logger.debug(f"Resolved configured week start {value!r} to {week_start}")
        return week_start

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level {value!r}")
        return level


settings = Settings()
