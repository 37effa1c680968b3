"""
Application Settings for ScholarMatch

Centralized configuration using Pydantic Settings with .env support.
All environment variables are validated at startup.
"""

from functools import lru_cache
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scholarmatch.domain.scoring.weights import ScoringWeights
from scholarmatch.infrastructure.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    WEIGHT_* variables override the dimension weights of the match score.
    They must be finite, within 0-1, and sum to 1.0.
    """

    # Application Settings
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # CORS Configuration
    allowed_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    # Scoring Configuration
    max_batch_size: int = 200
    weight_academic: float = 0.30
    weight_demographic: float = 0.15
    weight_major_field: float = 0.20
    weight_experience: float = 0.15
    weight_financial: float = 0.10
    weight_special: float = 0.10

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("max_batch_size")
    @classmethod
    def validate_batch_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_batch_size must be at least 1")
        return v

    def scoring_weights(self) -> ScoringWeights:
        """
        Build the validated dimension weights.

        Raises:
            ConfigurationError: If the configured weights are invalid
        """
        try:
            return ScoringWeights(
                academic=self.weight_academic,
                demographic=self.weight_demographic,
                major_field=self.weight_major_field,
                experience=self.weight_experience,
                financial=self.weight_financial,
                special=self.weight_special,
            )
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid scoring weights: {e}",
                invalid_keys=[
                    name for name in type(self).model_fields if name.startswith("weight_")
                ],
                original_error=e,
            )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"

    @property
    def debug_enabled(self) -> bool:
        """Debug mode, forced off in production."""
        return self.debug and not self.is_production


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience export for direct import
settings = get_settings()
