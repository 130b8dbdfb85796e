"""HTTP surface of the soil advisor."""
