"""Remote explanation client for SideDiff."""

from sidediffpack.explain.client import (
    DEFAULT_EXPLAIN_URL,
    EMPTY_INPUT_MESSAGE,
    EXPLAIN_TIMEOUT_ENV_VAR,
    EXPLAIN_URL_ENV_VAR,
    NO_EXPLANATION_MESSAGE,
    UNAVAILABLE_MESSAGE,
    ExplainConfig,
    explain_differences,
    request_explanation,
)
from sidediffpack.explain.exceptions import ExplainConfigError, ExplainError, ExplainServiceError

__all__ = [
    "DEFAULT_EXPLAIN_URL",
    "EMPTY_INPUT_MESSAGE",
    "EXPLAIN_TIMEOUT_ENV_VAR",
    "EXPLAIN_URL_ENV_VAR",
    "NO_EXPLANATION_MESSAGE",
    "UNAVAILABLE_MESSAGE",
    "ExplainConfig",
    "ExplainConfigError",
    "ExplainError",
    "ExplainServiceError",
    "explain_differences",
    "request_explanation",
]
