"""Pydantic models for CLI settings."""

from __future__ import annotations

from pydantic import BaseModel


class CliSettings(BaseModel):
    """Global CLI flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
