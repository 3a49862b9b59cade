"""Home directory and path management for prelint."""
