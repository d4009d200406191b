from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class TerminalSettings(BaseModel):
    """Display options for the terminal session."""

    clear_screen: bool = Field(default=True, description="Erase the screen before each redraw")
    log_level: LogLevel = Field(default="warning", description="Level for diagnostic logging on stderr")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return str(value).lower()
