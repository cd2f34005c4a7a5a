"""Main application configuration schema."""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .logging_schema import LoggingConfig
from .sink_schema import LoggerSinkConfig


def _default_loggers() -> List[LoggerSinkConfig]:
    return [
        LoggerSinkConfig(name="consoleLogger", type="console"),
        LoggerSinkConfig(name="fileLogger", type="file", path="app_errors_container.log"),
    ]


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    loggers: List[LoggerSinkConfig] = Field(
        default_factory=_default_loggers,
        description="Named loggers registered with the container",
    )
    discounts: Dict[str, float] = Field(
        default_factory=dict,
        description="Extra percentage discounts registered by name",
    )
    currency: str = Field("TL", description="Currency shown in payment confirmations")

    @field_validator("discounts")
    @classmethod
    def validate_discounts(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Validate discount percentages."""
        for name, percent in v.items():
            if not 0 <= percent <= 100:
                raise ValueError(f"Discount '{name}' must be between 0 and 100 percent")
        return v

    @model_validator(mode="after")
    def ensure_unique_logger_names(self) -> "AppConfig":
        """Logger names must be unique within one configuration file."""
        names = [sink.name for sink in self.loggers]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate logger names: {duplicates}")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a raw dictionary."""
        return cls.model_validate(data)
