"""
Data models for a properties resolution run.
"""
from typing import Dict, Literal, Optional
from pydantic import BaseModel, Field, field_validator

# Ordered property name -> value mapping built from one file
PropertySet = Dict[str, str]

ResolutionMode = Literal["all", "single"]

LEGACY_OUTPUT_KEY = "value"
ENV_PATH_OUTPUT_KEY = "env_path"
JSON_OUTPUT_KEY = "props"
BASH_ARRAY_OUTPUT_KEY = "bash_array"


class ResolutionRequest(BaseModel):
    """Configuration for one run, usually built from the action inputs.

    ``export_all`` selects all mode; otherwise ``property_name`` is resolved
    on its own, falling back to ``default_value``.
    """
    file: str = Field(description="Glob pattern locating the properties file")
    property_name: Optional[str] = Field(default=None, description="Property to resolve in single mode")
    export_all: bool = Field(default=False, description="Emit every property instead of one")
    default_value: Optional[str] = Field(default=None, description="Fallback when the property is missing or empty")

    @field_validator("file")
    @classmethod
    def validate_file(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("file pattern must not be empty")
        return v


class ResolutionResult(BaseModel):
    """What a run emitted."""
    mode: ResolutionMode
    source_file: str
    properties: PropertySet = Field(default_factory=dict)
    env_path: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None
    used_default: bool = False
