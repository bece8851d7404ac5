"""Gemini-generated news and vocabulary digests delivered by email."""

__version__ = "0.1.0"
