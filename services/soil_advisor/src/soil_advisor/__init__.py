"""Soil advisor: relays soil measurements to Gemini and returns a crop suitability report."""

__version__ = "0.1.0"
