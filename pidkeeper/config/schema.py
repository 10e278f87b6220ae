"""Pydantic schema for configuration validation."""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.constants import ServiceDefaults


class LoggingConfig(BaseModel):
    """Schema for logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level for the pidkeeper logger"
    )
    file: Optional[str] = Field(default=None, description="Optional log file")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class DefaultsConfig(BaseModel):
    """Schema for values applied to every service."""

    pid_dir: Optional[str] = Field(
        default=None, description="Directory for marker files (default: runtime dir)"
    )
    poll_interval: float = Field(
        default=ServiceDefaults.POLL_INTERVAL,
        gt=0,
        description="Max seconds between shutdown checks while idle",
    )
    stop_poll_interval: float = Field(
        default=ServiceDefaults.STOP_POLL_INTERVAL,
        gt=0,
        description="Seconds between checks while stop() waits",
    )


class ServiceOverrides(BaseModel):
    """Schema for one service's section, keyed by display name."""

    pid_file: Optional[str] = None
    sleep_time: Optional[float] = Field(default=None, ge=0)
    poll_interval: Optional[float] = Field(default=None, gt=0)
    stop_poll_interval: Optional[float] = Field(default=None, gt=0)


class PidkeeperConfig(BaseModel):
    """Complete configuration schema."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    services: Dict[str, ServiceOverrides] = Field(default_factory=dict)
