"""Pydantic models for recognizer output."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class RecognizerResult(BaseModel):
    """Top intent and extracted entities for one message."""

    top_intent: str = "None"
    entities: dict[str, list[Any]] = Field(default_factory=dict)

    @field_validator("entities", mode="before")
    @classmethod
    def wrap_scalars(cls, v: Any) -> Any:
        # a recognizer may return a bare value for single-valued kinds
        if isinstance(v, dict):
            return {
                k: val if isinstance(val, list) else [val]
                for k, val in v.items()
                if val is not None
            }
        return v
