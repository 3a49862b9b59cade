"""Core models and helpers shared across prelint."""
