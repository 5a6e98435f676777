from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures. Velocity limits are
# fixed constants and deliberately have no section here.


class InputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file_path: str = Field(default="input.txt", validation_alias=AliasChoices("file_path", "file"))


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # Both output.file and output.file_path are accepted and normalized to file_path.
    file_path: str = Field(default="output.txt", validation_alias=AliasChoices("file_path", "file"))
    atomic_replace: bool = False


class LogSinkConfig(BaseModel):
    # Only one log sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["stdout", "jsonl"] = "stdout"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LogSinkConfig:
        # For jsonl kind, a path is required to avoid silent defaults.
        if self.kind == "jsonl" and not self.path:
            raise ValueError("logging.sink.path is required when kind is 'jsonl'")
        return self


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    sink: LogSinkConfig = Field(default_factory=LogSinkConfig)


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration; every section is optional.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
