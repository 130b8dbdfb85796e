"""Unit tests for AnalysisService: validation, extraction, fallback, error propagation."""
from unittest.mock import AsyncMock, MagicMock

import pytest

from soil_advisor.api.schemas import parse_soil_sample
from soil_advisor.clients import CompletionResponse
from soil_advisor.errors import UpstreamError, UpstreamRateLimitError, ValidationError
from soil_advisor.service import NO_RESPONSE_TEXT, AnalysisService, build_soil_prompt


@pytest.mark.asyncio
async def test_analyze_returns_first_candidate_text(fake_client: MagicMock, valid_payload: dict) -> None:
    result = await AnalysisService(fake_client).analyze(valid_payload)

    assert result.success is True
    assert result.crop == "rice"
    assert result.analysis == "Yes, suitable."


@pytest.mark.asyncio
async def test_analyze_calls_upstream_once_with_built_prompt(
    fake_client: MagicMock, valid_payload: dict
) -> None:
    await AnalysisService(fake_client).analyze(valid_payload)

    fake_client.complete.assert_awaited_once_with(build_soil_prompt(parse_soil_sample(valid_payload)))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {},
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{}]}}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
    ],
)
async def test_missing_text_falls_back(fake_client: MagicMock, valid_payload: dict, body: dict) -> None:
    fake_client.complete = AsyncMock(return_value=CompletionResponse.from_payload(body))

    result = await AnalysisService(fake_client).analyze(valid_payload)

    assert result.success is True
    assert result.analysis == NO_RESPONSE_TEXT


@pytest.mark.asyncio
async def test_invalid_payload_does_not_call_upstream(fake_client: MagicMock, valid_payload: dict) -> None:
    del valid_payload["rainfall"]

    with pytest.raises(ValidationError):
        await AnalysisService(fake_client).analyze(valid_payload)
    fake_client.complete.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        UpstreamRateLimitError("Request failed with status code 429", upstream_status=429),
        UpstreamError("Request failed with status code 500", upstream_status=500),
        UpstreamError("connection refused"),
    ],
)
async def test_upstream_errors_propagate_without_retry(
    fake_client: MagicMock, valid_payload: dict, error: UpstreamError
) -> None:
    fake_client.complete = AsyncMock(side_effect=error)

    with pytest.raises(type(error)) as exc_info:
        await AnalysisService(fake_client).analyze(valid_payload)
    assert exc_info.value is error
    assert fake_client.complete.await_count == 1
