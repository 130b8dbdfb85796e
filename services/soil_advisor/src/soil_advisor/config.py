"""Soil advisor service configuration."""
from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from shared.config import BaseAppSettings


class SoilAdvisorSettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="SOIL_ADVISOR_")

    host: str = "0.0.0.0"
    port: int = Field(3000, validation_alias="PORT")
    gemini_api_key: str = Field("", validation_alias="GEMINI_API_KEY")
    # None disables the outbound timeout entirely.
    upstream_timeout_seconds: float | None = 60.0
    json_logs: bool = True

    @field_validator("upstream_timeout_seconds", mode="before")
    @classmethod
    def _empty_timeout_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value
