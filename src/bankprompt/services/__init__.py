"""Application services."""

from bankprompt.services.generation import GenerationService

__all__ = ["GenerationService"]
