from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from app.analysis.deps import get_analysis_proxy
from app.analysis.schemas import AnalysisRequest, AnalysisResult
from app.analysis.service import AnalysisProxy

router = APIRouter(tags=["analysis"])


@router.post(
    "/analyzeMood",
    response_model=AnalysisResult,
    summary="Analyze mood data",
    responses={
        400: {"description": "An input field exceeds the configured size limit."},
        502: {"description": "The LLM service failed. No upstream detail is returned."},
        503: {"description": "The LLM credential is not configured."},
    },
)
async def analyze_mood(
    payload: AnalysisRequest,
    request: Request,
    proxy: AnalysisProxy = Depends(get_analysis_proxy),
) -> AnalysisResult:
    """
    Send the user's mood, sleep, habit and observation history to the LLM and
    return its free-text analysis.

    IMPORTANT:
    - This endpoint does not require caller authentication; every call spends
      LLM budget.
    - Nothing is stored. Inputs and outputs are never logged.
    """

    request_id = getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")
    return await proxy.analyze(payload, request_id=request_id)
