"""Protocol definitions for external dependencies.

The core only depends on these protocols, never on concrete
implementations. A real network-backed client plugs in here by
implementing GenerationBackend; the library ships only the
deterministic MockGenerationBackend.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class GenerationBackend(Protocol):
    """Interface for text generation services.

    Implementations must provide:
    - A single async generate call taking rendered prompt text

    Implementations must be safe to call from many concurrent tasks and
    hold no shared mutable state between calls.
    """

    async def generate(self, prompt_text: str) -> str:
        """Send rendered prompt text and return the response text.

        Args:
            prompt_text: Prompt text as produced by Prompt.render().

        Returns:
            The generated response text.

        Raises:
            GenerationFailure: If no response could be produced.
        """
        ...
