"""Soil analysis: validation + prompt assembly + one Gemini call + text extraction."""
from typing import Any

from shared.logging import get_logger

from soil_advisor.api.schemas import AnalysisResult, parse_soil_sample
from soil_advisor.clients.base import CompletionClient
from soil_advisor.errors import UpstreamError, UpstreamRateLimitError, ValidationError
from soil_advisor.metrics import record_outcome
from soil_advisor.service.prompts import build_soil_prompt

NO_RESPONSE_TEXT = "No response from Gemini."

logger = get_logger(__name__)


class AnalysisService:
    def __init__(self, completion_client: CompletionClient) -> None:
        self._client = completion_client

    async def analyze(self, payload: Any) -> AnalysisResult:
        """Analyze one inbound payload.

        Raises ValidationError for an incomplete or invalid payload and
        UpstreamError / UpstreamRateLimitError when the Gemini call fails.
        The upstream is called at most once; nothing is retried.
        """
        try:
            sample = parse_soil_sample(payload)
        except ValidationError:
            record_outcome("invalid")
            raise

        logger.info("soil_analysis_requested", crop=sample.crop_name)
        prompt = build_soil_prompt(sample)
        try:
            response = await self._client.complete(prompt)
        except UpstreamRateLimitError:
            record_outcome("rate_limited")
            raise
        except UpstreamError:
            record_outcome("upstream_error")
            raise

        text = response.first_text()
        fallback = not text
        record_outcome("fallback" if fallback else "success")
        logger.info("soil_analysis_completed", crop=sample.crop_name, fallback=fallback)
        return AnalysisResult(
            success=True,
            crop=sample.crop_name,
            analysis=text or NO_RESPONSE_TEXT,
        )
