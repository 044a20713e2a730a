"""Domain layer: pure models and constants."""
