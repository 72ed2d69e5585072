"""Integration tests for the template-to-response flow."""

from __future__ import annotations

import asyncio

import pytest

from bankprompt.adapters.generation.mock import (
    CREDIT_ANALYSIS_RESPONSE,
    FRAUD_ALERT_RESPONSE,
    GENERIC_RESPONSE,
)
from bankprompt.config import Settings, get_generation_backend
from bankprompt.core.domain_types import PromptBuilder
from bankprompt.core.templates import parse_template
from bankprompt.services.generation import GenerationService


class TestGenerationFlow:
    """Integration tests for templates, builder, service and backend together."""

    @pytest.fixture
    def service(self, monkeypatch: pytest.MonkeyPatch) -> GenerationService:
        """Return a service wired from environment settings."""
        monkeypatch.setenv("BANKPROMPT_BACKEND", "mock")
        monkeypatch.setenv("BANKPROMPT_MOCK_LATENCY_MS", "50")
        return GenerationService(get_generation_backend(Settings()))

    @pytest.mark.asyncio
    async def test_templates_from_json_payloads(self, service: GenerationService) -> None:
        """Test requests described as plain dicts, run concurrently."""
        payloads = [
            {"kind": "credit_risk", "loan_type": "mortgage", "focus": "default risk"},
            {"kind": "fraud_detection", "channel": "card payments", "scope": "velocity checks"},
            {"kind": "credit_risk", "loan_type": "auto loan", "focus": "collateral value"},
        ]

        responses = await asyncio.gather(
            *(service.generate_from_template(parse_template(p)) for p in payloads)
        )

        assert responses == [
            CREDIT_ANALYSIS_RESPONSE,
            FRAUD_ALERT_RESPONSE,
            CREDIT_ANALYSIS_RESPONSE,
        ]

    @pytest.mark.asyncio
    async def test_manual_and_template_prompts_share_backend(
        self, service: GenerationService
    ) -> None:
        """Test that manual prompts and templates use the same wire format."""
        manual = (
            PromptBuilder.new()
            .goal("Review Fraud indicators on a wire transfer")
            .role("Payments Analyst")
            .build()
        )
        neutral = PromptBuilder.new().goal("Summarize branch deposits").build()

        assert await service.generate(manual) == FRAUD_ALERT_RESPONSE
        assert await service.generate(neutral) == GENERIC_RESPONSE
