"""Configuration loading for prelint."""
