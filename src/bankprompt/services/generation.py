"""Generation service - renders prompts and dispatches them to a backend."""

from __future__ import annotations

from typing import Any

import structlog

from bankprompt.core.domain_types import Prompt
from bankprompt.core.exceptions import GenerationFailure
from bankprompt.core.interfaces import GenerationBackend
from bankprompt.core.templates import CreditRiskTemplate, FraudDetectionTemplate

logger = structlog.get_logger()


class GenerationService:
    """Sends prompts to a generation backend.

    Failures are logged and re-raised unchanged; the service never retries.
    """

    def __init__(self, backend: GenerationBackend):
        """Initialize the generation service.

        Args:
            backend: Backend that turns rendered prompt text into a response.
        """
        self.backend = backend

    async def generate(self, prompt: Prompt) -> str:
        """Render a prompt and return the backend's response.

        Args:
            prompt: The prompt to send.

        Returns:
            Response text.

        Raises:
            GenerationFailure: If the backend fails.
        """
        return await self._dispatch(prompt, logger.bind(sections=len(prompt)))

    async def generate_from_template(
        self,
        template: CreditRiskTemplate | FraudDetectionTemplate,
    ) -> str:
        """Expand a template, build its prompt and return the response.

        Args:
            template: Banking template to run.

        Returns:
            Response text.

        Raises:
            GenerationFailure: If the backend fails.
        """
        prompt = template.to_builder().build()
        log = logger.bind(
            template=template.kind,
            description=template.description(),
            sections=len(prompt),
        )
        return await self._dispatch(prompt, log)

    async def _dispatch(self, prompt: Prompt, log: Any) -> str:
        log = log.bind(backend=type(self.backend).__name__)
        text = prompt.render()
        log.info("generation_started", prompt_chars=len(text))

        try:
            response = await self.backend.generate(text)
        except GenerationFailure as e:
            log.warning("generation_failed", error=str(e), retryable=e.retryable)
            raise

        log.info("generation_completed", response_chars=len(response))
        return response
