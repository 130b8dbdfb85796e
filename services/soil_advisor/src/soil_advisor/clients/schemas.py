"""Typed view of Gemini generateContent request and response bodies."""
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError


class Part(BaseModel):
    text: str | None = None


class Content(BaseModel):
    parts: list[Part] = Field(default_factory=list)


class Candidate(BaseModel):
    content: Content | None = None


class CompletionResponse(BaseModel):
    """Upstream response; only the fields the relay reads are modelled."""

    candidates: list[Candidate] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "CompletionResponse":
        """Parse a decoded body; anything that does not fit the shape yields no candidates."""
        try:
            return cls.model_validate(payload)
        except PydanticValidationError:
            return cls()

    def first_text(self) -> str | None:
        """Text of the first part of the first candidate, if there is one."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text


def build_generate_request(prompt: str) -> dict[str, Any]:
    """Wrap a prompt in the generateContent request envelope."""
    return {"contents": [{"parts": [{"text": prompt}]}]}
