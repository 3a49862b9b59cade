"""prelint: run SwiftLint as a pre-build step."""

__version__ = "0.1.0"
