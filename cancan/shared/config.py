"""
Shared configuration management for the CanCan authorization engine.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineConfig(BaseSettings):
    """Engine configuration, overridable through CANCAN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CANCAN_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: str = Field(default="info", description="Log level passed to configure_logging")

    # Decision engine
    short_circuit: bool = Field(
        default=False,
        description="Resolve a query as soon as one condition passes and cancel the rest"
    )
    default_error_message: str = Field(
        default="Authorization error",
        description="Message of the error raised by authorize() when no factory is given"
    )


def get_config(**overrides) -> EngineConfig:
    """Get engine configuration, applying explicit overrides over the environment."""
    return EngineConfig(**overrides)
