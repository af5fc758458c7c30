"""HTTP client for the remote diff explanation service."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any, Callable
import warnings

from sidediffpack.explain.exceptions import ExplainConfigError, ExplainServiceError

EXPLAIN_URL_ENV_VAR = "SIDEDIFF_EXPLAIN_URL"
EXPLAIN_TIMEOUT_ENV_VAR = "SIDEDIFF_EXPLAIN_TIMEOUT"
DEFAULT_EXPLAIN_URL = "https://text-ai-diff.azurewebsites.net/api/explain-diff"
DEFAULT_TIMEOUT_SECONDS = 30.0

NO_EXPLANATION_MESSAGE = "No explanation generated."
UNAVAILABLE_MESSAGE = (
    "Unable to generate explanation at this time. "
    "Please ensure the backend service is running and accessible."
)
EMPTY_INPUT_MESSAGE = "Both texts must be non-empty to request an explanation."


@dataclass(slots=True)
class ExplainConfig:
    """Endpoint and transport settings for the explanation service."""

    endpoint: str = DEFAULT_EXPLAIN_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        endpoint = (self.endpoint or "").strip()
        if not endpoint.startswith(("http://", "https://")):
            raise ExplainConfigError(
                f"endpoint must be an http(s) URL, got {self.endpoint!r}"
            )
        self.endpoint = endpoint

        if isinstance(self.timeout_seconds, bool) or not isinstance(
            self.timeout_seconds, (int, float)
        ):
            raise ExplainConfigError("timeout_seconds must be a number")
        if self.timeout_seconds <= 0:
            raise ExplainConfigError("timeout_seconds must be greater than zero")
        self.timeout_seconds = float(self.timeout_seconds)

    @classmethod
    def from_env(
        cls,
        *,
        endpoint: str | None = None,
        timeout_seconds: float | None = None,
    ) -> "ExplainConfig":
        """Build a config from the environment; explicit arguments win and skip their variable."""
        if endpoint is None:
            endpoint = os.getenv(EXPLAIN_URL_ENV_VAR, "").strip() or DEFAULT_EXPLAIN_URL
        if timeout_seconds is not None:
            return cls(endpoint=endpoint, timeout_seconds=timeout_seconds)

        raw_timeout = os.getenv(EXPLAIN_TIMEOUT_ENV_VAR, "").strip()
        if not raw_timeout:
            return cls(endpoint=endpoint)
        try:
            timeout = float(raw_timeout)
        except ValueError as error:
            raise ExplainConfigError(
                f"{EXPLAIN_TIMEOUT_ENV_VAR} must be a number of seconds, got {raw_timeout!r}"
            ) from error
        return cls(endpoint=endpoint, timeout_seconds=timeout)


def request_explanation(
    original: str,
    modified: str,
    *,
    config: ExplainConfig | None = None,
    request_post: Callable[..., Any] | None = None,
) -> str:
    """Ask the service to explain the differences; raise on any failure."""
    import requests

    effective = config or ExplainConfig.from_env()
    post_fn = request_post or requests.post

    try:
        response = post_fn(
            effective.endpoint,
            headers={"Content-Type": "application/json"},
            json={"originalText": original, "modifiedText": modified},
            timeout=effective.timeout_seconds,
        )
        response.raise_for_status()
    except requests.RequestException as error:
        raise ExplainServiceError(f"explanation request failed: {error}") from error

    try:
        payload = response.json()
    except ValueError as error:
        raise ExplainServiceError("explanation service returned invalid JSON") from error

    explanation = payload.get("explanation") if isinstance(payload, dict) else None
    if isinstance(explanation, str) and explanation.strip():
        return explanation
    return NO_EXPLANATION_MESSAGE


def explain_differences(
    original: str,
    modified: str,
    *,
    config: ExplainConfig | None = None,
    request_post: Callable[..., Any] | None = None,
) -> str:
    """Best-effort explanation; falls back to a fixed message on failure."""
    if not original or not modified:
        return EMPTY_INPUT_MESSAGE

    try:
        return request_explanation(
            original,
            modified,
            config=config,
            request_post=request_post,
        )
    except ExplainServiceError as error:
        warnings.warn(
            f"SideDiff explanation unavailable: {error}",
            RuntimeWarning,
            stacklevel=2,
        )
        return UNAVAILABLE_MESSAGE
