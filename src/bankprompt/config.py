"""Settings loaded from the environment and the backend factory."""

from __future__ import annotations

import os
from functools import lru_cache

from bankprompt.adapters.generation.mock import MockGenerationBackend
from bankprompt.core.exceptions import ConfigurationError
from bankprompt.core.interfaces import GenerationBackend


class Settings:
    """Library settings loaded from environment."""

    def __init__(self) -> None:
        """Load settings from environment variables."""
        self.backend = os.getenv("BANKPROMPT_BACKEND", "mock").strip().lower()
        self.mock_latency_ms = os.getenv("BANKPROMPT_MOCK_LATENCY_MS", "50")

    @property
    def mock_latency_seconds(self) -> float:
        """Mock backend delay converted to seconds.

        Raises:
            ConfigurationError: If the value is not a non-negative number.
        """
        try:
            latency_ms = float(self.mock_latency_ms)
        except ValueError as e:
            raise ConfigurationError(
                f"BANKPROMPT_MOCK_LATENCY_MS must be a number, got {self.mock_latency_ms!r}"
            ) from e
        if latency_ms < 0:
            raise ConfigurationError("BANKPROMPT_MOCK_LATENCY_MS must not be negative")
        return latency_ms / 1000


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings, read once from the environment."""
    return Settings()


def get_generation_backend(settings: Settings | None = None) -> GenerationBackend:
    """Get the configured generation backend.

    Selection:
    1. BANKPROMPT_BACKEND=mock (default) -> MockGenerationBackend

    Args:
        settings: Settings to use. Defaults to get_settings().

    Returns:
        Configured backend instance.

    Raises:
        ConfigurationError: If the backend name is unknown.
    """
    settings = settings or get_settings()

    if settings.backend == "mock":
        return MockGenerationBackend(latency_seconds=settings.mock_latency_seconds)

    raise ConfigurationError(f"Unsupported BANKPROMPT_BACKEND: {settings.backend}")
