"""Tests for soil prompt assembly."""
from soil_advisor.api.schemas import parse_soil_sample
from soil_advisor.service.prompts import build_soil_prompt, format_measurement


def test_prompt_is_deterministic(valid_payload: dict) -> None:
    first = build_soil_prompt(parse_soil_sample(valid_payload))
    second = build_soil_prompt(parse_soil_sample(dict(valid_payload)))
    assert first == second


def test_prompt_includes_all_readings(valid_payload: dict) -> None:
    prompt = build_soil_prompt(parse_soil_sample(valid_payload))
    assert "suitable for growing rice." in prompt
    assert "🌡️ Temperature: 25 °C" in prompt
    assert "💧 Humidity: 60 %" in prompt
    assert "🌱 Soil Moisture: 40\n" in prompt
    assert "🧪 Nitrogen (N): 50 ppm" in prompt
    assert "🧪 Phosphorus (P): 30 ppm" in prompt
    assert "🧪 Potassium (K): 20 ppm" in prompt
    assert "⚗️ pH: 6.5\n" in prompt
    assert "🌧️ Rainfall: 100 mm" in prompt


def test_prompt_requests_four_markdown_sections(valid_payload: dict) -> None:
    prompt = build_soil_prompt(parse_soil_sample(valid_payload))
    assert "1.  **Soil Health Status:**" in prompt
    assert '2.  **rice Suitability:** (Clear "Yes", "No", or "Marginal" with reason)' in prompt
    assert "3.  **Recommendations:**" in prompt
    assert "4.  **Summary:** (A single-line conclusion)" in prompt


def test_prompt_starts_and_ends_with_newline(valid_payload: dict) -> None:
    prompt = build_soil_prompt(parse_soil_sample(valid_payload))
    assert prompt.startswith("\nYou are an expert soil scientist")
    assert prompt.endswith("(A single-line conclusion)\n")


def test_integral_float_renders_like_integer(valid_payload: dict) -> None:
    as_float = dict(valid_payload, temperature=25.0)
    assert build_soil_prompt(parse_soil_sample(as_float)) == build_soil_prompt(
        parse_soil_sample(valid_payload)
    )


def test_format_measurement() -> None:
    assert format_measurement(0) == "0"
    assert format_measurement(100.0) == "100"
    assert format_measurement(6.5) == "6.5"
    assert format_measurement(-3) == "-3"


def test_crop_name_with_braces_is_not_reformatted(valid_payload: dict) -> None:
    valid_payload["cropName"] = "{ph}"
    prompt = build_soil_prompt(parse_soil_sample(valid_payload))
    assert "growing {ph}." in prompt
