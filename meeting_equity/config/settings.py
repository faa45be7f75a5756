from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="MEETING_EQUITY_LOG_LEVEL")
    heatmap_max_workers: int = Field(
        default=0,
        ge=0,
        validation_alias="MEETING_EQUITY_HEATMAP_MAX_WORKERS",
        description="Thread pool size for heatmap hours (0 or 1 = sequential)",
    )
    default_top_n: int = Field(
        default=3,
        ge=1,
        validation_alias="MEETING_EQUITY_DEFAULT_TOP_N",
        description="Number of suggestions returned when the caller does not ask for a count",
    )
    quality_excellent: float = Field(
        default=95.0,
        validation_alias="MEETING_EQUITY_QUALITY_EXCELLENT",
        description="Lowest normalized score rated excellent (also the sweet-spot threshold)",
    )
    quality_good: float = Field(default=85.0, validation_alias="MEETING_EQUITY_QUALITY_GOOD")
    quality_fair: float = Field(default=65.0, validation_alias="MEETING_EQUITY_QUALITY_FAIR")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @model_validator(mode="after")
    def validate_quality_bands(self) -> "Settings":
        """Quality thresholds must be descending and inside 0-100."""
        bands = (self.quality_excellent, self.quality_good, self.quality_fair)
        if not all(0 <= band <= 100 for band in bands):
            raise ValueError(f"Quality thresholds must be within 0-100, got {bands}")
        if not self.quality_excellent > self.quality_good > self.quality_fair:
            raise ValueError(f"Quality thresholds must be strictly descending, got {bands}")
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
