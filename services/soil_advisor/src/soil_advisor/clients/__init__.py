from soil_advisor.clients.base import CompletionClient
from soil_advisor.clients.gemini_client import GEMINI_API_URL, GeminiClient
from soil_advisor.clients.schemas import CompletionResponse

__all__ = ["CompletionClient", "CompletionResponse", "GEMINI_API_URL", "GeminiClient"]
