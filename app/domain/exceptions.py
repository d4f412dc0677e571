from __future__ import annotations


class BusinessValidationError(Exception):
    """Raised when a domain/business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AnalysisError(Exception):
    """Base error for mood analysis failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(AnalysisError):
    """Raised when the LLM credential is missing (no network call is attempted)."""


class UpstreamError(AnalysisError):
    """Raised when the LLM call fails. The message is generic and safe to return."""
