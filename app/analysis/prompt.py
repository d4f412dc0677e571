from __future__ import annotations

from app.analysis.schemas import AnalysisRequest

SYSTEM_PROMPT = "You are a helpful, empathetic data analyst for a mental health app."

_INSTRUCTIONS = (
    "You are an emotional wellness coach. Analyze the following user data to find patterns "
    "between sleep, context, habits (signals), and mood.\n"
    "Provide a daily summary and identify triggers (positive 'Boosters' and negative 'Drainers').\n"
    "Also note any trends in the user's observations.\n"
    "Be concise, friendly, and use bullet points.\n\n"
)

# Section order is part of the contract with the model; do not reorder.
_SECTION_LABELS = (
    "SLEEP HISTORY",
    "HABITS / TRACKERS",
    "OBSERVATIONS",
    "MOOD HISTORY",
)

_CLOSING = "\nPlease analyze this data:"


def render_analysis_prompt(request: AnalysisRequest) -> str:
    """Render the user prompt. Field values are inserted verbatim."""

    values = (
        request.sleep_history,
        request.habits,
        request.observations,
        request.mood_history,
    )
    sections = "".join(
        f"--- {label} ---\n{value}\n" for label, value in zip(_SECTION_LABELS, values)
    )
    return f"{_INSTRUCTIONS}{sections}{_CLOSING}"


def build_analysis_prompts(request: AnalysisRequest) -> tuple[str, str]:
    """Create (system_prompt, user_prompt) for mood analysis."""

    return SYSTEM_PROMPT, render_analysis_prompt(request)
