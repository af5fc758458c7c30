from typing import Any

import pytest
import requests

from sidediffpack.explain import (
    DEFAULT_EXPLAIN_URL,
    EMPTY_INPUT_MESSAGE,
    EXPLAIN_TIMEOUT_ENV_VAR,
    EXPLAIN_URL_ENV_VAR,
    NO_EXPLANATION_MESSAGE,
    UNAVAILABLE_MESSAGE,
    ExplainConfig,
    ExplainConfigError,
    ExplainServiceError,
    explain_differences,
    request_explanation,
)


class _MockResponse:
    def __init__(self, payload: Any = None, *, status_code: int = 200, invalid_json: bool = False):
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value")
        return self._payload


def _config() -> ExplainConfig:
    return ExplainConfig(endpoint="http://explain.test/api/explain-diff", timeout_seconds=5)


def test_request_posts_both_texts_and_returns_explanation() -> None:
    calls: list[dict[str, Any]] = []

    def _mock_post(
        url: str,
        *,
        headers: dict[str, str],
        json: dict[str, object],
        timeout: float,
    ) -> _MockResponse:
        calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        return _MockResponse({"explanation": "Line 2 changed from b to c."})

    explanation = request_explanation("a\nb", "a\nc", config=_config(), request_post=_mock_post)

    assert explanation == "Line 2 changed from b to c."
    assert calls == [
        {
            "url": "http://explain.test/api/explain-diff",
            "headers": {"Content-Type": "application/json"},
            "json": {"originalText": "a\nb", "modifiedText": "a\nc"},
            "timeout": 5.0,
        }
    ]


@pytest.mark.parametrize("payload", [{}, {"explanation": ""}, {"explanation": None}, ["x"]])
def test_missing_explanation_uses_placeholder(payload: Any) -> None:
    explanation = request_explanation(
        "a",
        "b",
        config=_config(),
        request_post=lambda *args, **kwargs: _MockResponse(payload),
    )

    assert explanation == NO_EXPLANATION_MESSAGE


def test_request_raises_on_http_error() -> None:
    with pytest.raises(ExplainServiceError, match="500 Server Error"):
        request_explanation(
            "a",
            "b",
            config=_config(),
            request_post=lambda *args, **kwargs: _MockResponse(status_code=500),
        )


def test_request_raises_on_invalid_json() -> None:
    with pytest.raises(ExplainServiceError, match="invalid JSON"):
        request_explanation(
            "a",
            "b",
            config=_config(),
            request_post=lambda *args, **kwargs: _MockResponse(invalid_json=True),
        )


def test_explain_falls_back_with_warning_on_transport_failure() -> None:
    def _mock_post(*args: Any, **kwargs: Any) -> _MockResponse:
        raise requests.ConnectionError("connection refused")

    with pytest.warns(RuntimeWarning, match="SideDiff explanation unavailable"):
        explanation = explain_differences("a", "b", config=_config(), request_post=_mock_post)

    assert explanation == UNAVAILABLE_MESSAGE


def test_explain_skips_service_for_empty_input() -> None:
    def _mock_post(*args: Any, **kwargs: Any) -> _MockResponse:
        raise AssertionError("service must not be called")

    assert explain_differences("", "b", request_post=_mock_post) == EMPTY_INPUT_MESSAGE
    assert explain_differences("a", "", request_post=_mock_post) == EMPTY_INPUT_MESSAGE


def test_default_transport_is_requests_post(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str] = []

    def _mock_post(url: str, **kwargs: Any) -> _MockResponse:
        seen.append(url)
        return _MockResponse({"explanation": "ok"})

    monkeypatch.delenv(EXPLAIN_URL_ENV_VAR, raising=False)
    monkeypatch.delenv(EXPLAIN_TIMEOUT_ENV_VAR, raising=False)
    monkeypatch.setattr(requests, "post", _mock_post)

    assert explain_differences("a", "b") == "ok"
    assert seen == [DEFAULT_EXPLAIN_URL]


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(EXPLAIN_URL_ENV_VAR, " https://example.test/explain ")
    monkeypatch.setenv(EXPLAIN_TIMEOUT_ENV_VAR, "2.5")

    config = ExplainConfig.from_env()

    assert config.endpoint == "https://example.test/explain"
    assert config.timeout_seconds == 2.5


def test_config_from_env_rejects_bad_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(EXPLAIN_TIMEOUT_ENV_VAR, "soon")

    with pytest.raises(ExplainConfigError, match=EXPLAIN_TIMEOUT_ENV_VAR):
        ExplainConfig.from_env()


@pytest.mark.parametrize(
    ("endpoint", "timeout"),
    [
        ("ftp://example.test", 1.0),
        ("", 1.0),
        ("https://example.test", 0),
        ("https://example.test", -3),
        ("https://example.test", True),
    ],
)
def test_config_validation(endpoint: str, timeout: Any) -> None:
    with pytest.raises(ExplainConfigError):
        ExplainConfig(endpoint=endpoint, timeout_seconds=timeout)


def test_config_from_env_prefers_explicit_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(EXPLAIN_URL_ENV_VAR, "https://env.test/explain")
    monkeypatch.setenv(EXPLAIN_TIMEOUT_ENV_VAR, "soon")

    config = ExplainConfig.from_env(endpoint="http://cli.test/explain", timeout_seconds=4)

    assert config.endpoint == "http://cli.test/explain"
    assert config.timeout_seconds == 4.0
