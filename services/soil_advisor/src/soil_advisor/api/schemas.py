"""API request/response schemas and boundary validation."""
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from soil_advisor.errors import INVALID_FIELDS_MESSAGE, MISSING_FIELDS_MESSAGE, ValidationError

# Strict: booleans and numeric strings are rejected; integers keep their type
# so they render without a trailing ".0".
Measurement = Union[StrictInt, StrictFloat]

MEASUREMENT_FIELDS = (
    "temperature",
    "humidity",
    "moisture",
    "nitrogen",
    "phosphorus",
    "potassium",
    "ph",
    "rainfall",
)


class SoilSample(BaseModel):
    """Validated soil and environmental readings for one crop."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    temperature: Measurement
    humidity: Measurement
    moisture: Measurement
    nitrogen: Measurement
    phosphorus: Measurement
    potassium: Measurement
    ph: Measurement
    rainfall: Measurement
    crop_name: StrictStr = Field(..., alias="cropName", min_length=1)


class AnalysisResult(BaseModel):
    success: bool = True
    crop: str
    analysis: str


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None


def missing_fields(payload: Any) -> list[str]:
    """Names of required fields that are absent (null counts as absent, 0 does not)."""
    if not isinstance(payload, dict):
        return [*MEASUREMENT_FIELDS, "cropName"]
    missing = [name for name in MEASUREMENT_FIELDS if payload.get(name) is None]
    if not payload.get("cropName"):
        missing.append("cropName")
    return missing


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"] if not isinstance(p, int) and p not in ("int", "float"))
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(dict.fromkeys(parts))


def parse_soil_sample(payload: Any) -> SoilSample:
    """Validate an inbound body and build a SoilSample, or raise ValidationError."""
    if missing_fields(payload):
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    try:
        return SoilSample.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(INVALID_FIELDS_MESSAGE, detail=_describe(e)) from e
