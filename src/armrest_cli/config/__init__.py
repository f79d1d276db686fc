"""Configuration models and persistence."""
