"""Config schema definitions."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    verbose: bool = False
    log_file: Optional[str] = None


class StepConfig(BaseModel):
    transformation: str
    name: Optional[str] = None
    columns: Optional[Union[str, int, list[Union[str, int]]]] = None
    params: dict[str, Any] = Field(default_factory=dict)

    @field_validator("transformation")
    @classmethod
    def transformation_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("transformation must not be blank")
        return value


class PipelineConfig(BaseModel):
    steps: list[StepConfig] = Field(default_factory=list)

    @field_validator("steps")
    @classmethod
    def unique_step_names(cls, steps: list[StepConfig]) -> list[StepConfig]:
        """Reject duplicate explicit step names; progress output relies on them."""
        names = [step.name for step in steps if step.name]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate pipeline step names: {duplicates}")
        return steps


class AppConfig(BaseModel):
    logging: LoggingConfig = LoggingConfig()
    pipeline: PipelineConfig = PipelineConfig()
