"""Prompt building, Gemini generation, mail composition and the run pipeline."""

__all__ = [
    "composer",
    "llm_client",
    "pipeline",
    "prompt_builder",
]
