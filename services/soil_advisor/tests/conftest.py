"""Shared fixtures for soil advisor tests."""
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from soil_advisor.clients import CompletionClient, CompletionResponse
from soil_advisor.config import SoilAdvisorSettings


def gemini_body(text: str) -> dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
            }
        ]
    }


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    return {
        "temperature": 25,
        "humidity": 60,
        "moisture": 40,
        "nitrogen": 50,
        "phosphorus": 30,
        "potassium": 20,
        "ph": 6.5,
        "rainfall": 100,
        "cropName": "rice",
    }


@pytest.fixture
def settings() -> SoilAdvisorSettings:
    return SoilAdvisorSettings(_env_file=None, GEMINI_API_KEY="test-key", json_logs=False)


@pytest.fixture
def fake_client() -> MagicMock:
    client = MagicMock(spec=CompletionClient)
    client.complete = AsyncMock(
        return_value=CompletionResponse.from_payload(gemini_body("Yes, suitable."))
    )
    return client
