"""Cross-cutting helpers shared by the soil advisor services."""
