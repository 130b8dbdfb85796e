"""Prompt assembly for soil suitability analysis."""
from soil_advisor.api.schemas import Measurement, SoilSample

SOIL_ANALYSIS_PROMPT_TEMPLATE = """
You are an expert soil scientist and crop advisor. Analyze the following soil and environmental data to assess if the conditions are suitable for growing {crop_name}. Then, provide recommendations for improvement.

Your analysis MUST be concise and practical.

---
[DATA]
🌡️ Temperature: {temperature} °C
💧 Humidity: {humidity} %
🌱 Soil Moisture: {moisture}
🧪 Nitrogen (N): {nitrogen} ppm
🧪 Phosphorus (P): {phosphorus} ppm
🧪 Potassium (K): {potassium} ppm
⚗️ pH: {ph}
🌧️ Rainfall: {rainfall} mm

---
[REQUEST]
Provide a short report in Markdown format with these exact sections:
1.  **Soil Health Status:** (Brief overview of N, P, K, and pH)
2.  **{crop_name} Suitability:** (Clear "Yes", "No", or "Marginal" with reason)
3.  **Recommendations:** (Bulleted list of 2-3 top actions for fertilizer or amendments)
4.  **Summary:** (A single-line conclusion)
"""


def format_measurement(value: Measurement) -> str:
    """Render a reading the way it appeared in JSON: 25.0 -> "25", 6.5 -> "6.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_soil_prompt(sample: SoilSample) -> str:
    return SOIL_ANALYSIS_PROMPT_TEMPLATE.format(
        crop_name=sample.crop_name,
        temperature=format_measurement(sample.temperature),
        humidity=format_measurement(sample.humidity),
        moisture=format_measurement(sample.moisture),
        nitrogen=format_measurement(sample.nitrogen),
        phosphorus=format_measurement(sample.phosphorus),
        potassium=format_measurement(sample.potassium),
        ph=format_measurement(sample.ph),
        rainfall=format_measurement(sample.rainfall),
    )
