from __future__ import annotations

from app.analysis.service import AnalysisProxy
from app.core.llm.deps import build_openai_client
from app.core.settings import Settings


def get_analysis_proxy() -> AnalysisProxy:
    """
    Dependency provider for AnalysisProxy.

    Settings are built fresh per request (not via the cached `get_settings`) so a
    provisioned or rotated OPENAI_API_KEY takes effect without a restart. A
    missing key is not an error here; the proxy reports it as ConfigurationError.
    """

    return AnalysisProxy(settings=Settings(), client_factory=build_openai_client)
