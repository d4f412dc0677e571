from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AnalysisRequest(BaseModel):
    """Wellness data submitted for analysis. All fields are opaque free text."""

    model_config = ConfigDict(extra="ignore")

    mood_history: str = Field(
        default="",
        alias="moodHistory",
        description="Mood entries as rendered by the app (free text).",
        examples=["Mon: happy\nTue: anxious"],
    )
    sleep_history: str = Field(
        default="",
        alias="sleepHistory",
        description="Sleep entries (free text).",
        examples=["Mon: 7h\nTue: 5h"],
    )
    habits: str = Field(
        default="",
        description="Habit / tracker entries (free text).",
        examples=["Exercise: Mon, Tue"],
    )
    observations: str = Field(
        default="",
        description="Free-text observations written by the user.",
        examples=["Felt tired after lunch."],
    )


class AnalysisResult(BaseModel):
    result: str = Field(description="The model's analysis, returned verbatim.")
