from soil_advisor.service.analysis_service import NO_RESPONSE_TEXT, AnalysisService
from soil_advisor.service.prompts import build_soil_prompt

__all__ = ["AnalysisService", "NO_RESPONSE_TEXT", "build_soil_prompt"]
