"""Named logger sink configuration schema."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LoggerSinkConfig(BaseModel):
    """A named logger to register with the container."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Name the logger is registered under")
    type: str = Field("console", description="Logger type (console, file)")
    path: Optional[str] = Field(None, description="Target file for file loggers")
    prefix: str = Field("FILE: ", description="Line prefix for file loggers")

    @model_validator(mode="after")
    def ensure_file_path(self) -> "LoggerSinkConfig":
        """File loggers need a target path."""
        if self.type == "file" and not self.path:
            raise ValueError(f"Logger '{self.name}' of type 'file' requires a path")
        return self
