from __future__ import annotations

from pydantic import BaseModel, Field


class HealthOut(BaseModel):
    """Health check response."""

    status: str = Field(
        description="`ok` means the API process is up. The LLM service is not checked.",
        examples=["ok"],
    )
