from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_CERTAINTY


class Settings(BaseSettings):
    # Probabilistic testing
    probable_prime_certainty: int = Field(
        default=DEFAULT_CERTAINTY, ge=1, le=256,
        description="Random Miller-Rabin rounds for values above 64 bits"
    )

    # Parallel discovery
    max_degree_of_parallelism: Optional[int] = Field(
        default=None, ge=1,
        description="Default worker count for parallel discovery (None = all CPUs)"
    )
    parallel_batch_size: int = Field(
        default=64, ge=1, le=65536,
        description="Candidates evaluated per worker per batch"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level for setup_logging")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    model_config = SettingsConfigDict(
        env_prefix="NUMERIC_PRIMES_",
        env_file=".env",
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"log_level must be a standard logging level, got {v}")
        return level


@lru_cache()
def get_settings():
    return Settings()


def load_settings(config_path: str) -> Settings:
    """
    Load settings from a YAML file, honoring <name>.local.yaml overrides.

    Keys may be given flat or grouped under the 'primes' and 'logging'
    sections:

        primes:
          probable_prime_certainty: 20
        logging:
          level: DEBUG

    Environment variables still apply to keys the file leaves unset.
    """
    from .config_manager import ConfigManager

    manager = ConfigManager()
    return Settings(**manager.settings_values(manager.load_config(config_path)))
