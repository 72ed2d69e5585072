"""Mock generation backend for testing."""

from __future__ import annotations

import asyncio

import structlog

logger = structlog.get_logger()

DEFAULT_LATENCY_SECONDS = 0.05

CREDIT_ANALYSIS_RESPONSE = (
    "CREDIT ANALYSIS COMPLETE\n"
    "\n"
    "Applicant Profile: FICO 720, DTI 28%, Stable Employment\n"
    "Risk Assessment: LOW RISK (2.1% default probability)\n"
    "Recommendation: APPROVED at Prime + 1.25%\n"
    "Required: Income verification, property appraisal"
)

FRAUD_ALERT_RESPONSE = (
    "FRAUD ALERT ISSUED\n"
    "\n"
    "Transaction Pattern: Multiple ATM withdrawals detected\n"
    "Risk Level: HIGH (Score 85/100)\n"
    "Geographic Anomaly: 500+ miles from normal location\n"
    "Action Required: FREEZE card, contact customer immediately"
)

GENERIC_RESPONSE = (
    "Analysis complete. Banking task processed according to "
    "regulatory guidelines and best practices."
)


class MockGenerationBackend:
    """Mock backend for testing - returns canned banking responses.

    Classifies the prompt text with ordered, case-sensitive substring
    checks:
    1. "credit risk" or "Credit Risk" -> credit analysis
    2. "fraud" or "Fraud" -> fraud alert
    3. anything else -> generic completion

    Only the two listed spellings match; "CREDIT RISK" or "FRAUD" fall
    through to the next rule.

    The backend is stateless. The simulated latency is an asyncio sleep,
    so concurrent callers keep making progress while one call waits.

    Attributes:
        latency_seconds: Simulated delay before each response.
    """

    def __init__(self, latency_seconds: float = DEFAULT_LATENCY_SECONDS) -> None:
        """Initialize the mock backend.

        Args:
            latency_seconds: Simulated delay before each response.
        """
        self.latency_seconds = latency_seconds

    async def generate(self, prompt_text: str) -> str:
        """Return a canned response based on prompt content.

        Args:
            prompt_text: Rendered prompt text.

        Returns:
            One of the fixed response texts. Never empty.
        """
        await asyncio.sleep(self.latency_seconds)

        route, response = self._classify(prompt_text)
        logger.debug("Mock generation", route=route, prompt_chars=len(prompt_text))
        return response

    @staticmethod
    def _classify(prompt_text: str) -> tuple[str, str]:
        if "credit risk" in prompt_text or "Credit Risk" in prompt_text:
            return "credit_risk", CREDIT_ANALYSIS_RESPONSE
        if "fraud" in prompt_text or "Fraud" in prompt_text:
            return "fraud", FRAUD_ALERT_RESPONSE
        return "generic", GENERIC_RESPONSE
