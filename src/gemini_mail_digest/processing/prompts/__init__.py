from .digest_prompt import PROMPT_TEMPLATES

__all__ = ["PROMPT_TEMPLATES"]
