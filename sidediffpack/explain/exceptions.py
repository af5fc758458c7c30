"""Explanation client exceptions."""


class ExplainError(Exception):
    """Base class for explanation client errors."""


class ExplainConfigError(ExplainError):
    """Invalid explanation client configuration."""


class ExplainServiceError(ExplainError):
    """Explanation service was unreachable or returned an unusable response."""
