"""Core data models for host-trust."""

from typing import Literal

from pydantic import BaseModel, Field


class LoadInstruction(BaseModel):
    """A single CA source selected from configuration."""

    kind: Literal["file", "dir"] = Field(description="Load a file or a directory")
    path: str = Field(description="Path to load, used literally")
    source: str = Field(description="Config key or environment variable it came from")

    model_config = {"frozen": True}
