"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from typoposter.config import settings


class PosterRequest(BaseModel):
    text: str = Field(default="", description="Poster text; empty yields the placeholder poster")
    title: str = Field(default="", description="Optional <title> for the SVG document")

    @field_validator("text")
    @classmethod
    def _limit_length(cls, v: str) -> str:
        if len(v) > settings.max_text_length:
            raise ValueError(f"text longer than {settings.max_text_length} characters")
        return v
