"""Domain object fixtures for testing."""

from __future__ import annotations

import pytest

from bankprompt.core.domain_types import Prompt, PromptBuilder
from bankprompt.core.templates import CreditRiskTemplate, FraudDetectionTemplate


@pytest.fixture
def sample_credit_risk_template() -> CreditRiskTemplate:
    """Return a sample credit risk template."""
    return CreditRiskTemplate(loan_type="mortgage", focus="default risk")


@pytest.fixture
def sample_fraud_detection_template() -> FraudDetectionTemplate:
    """Return a sample fraud detection template."""
    return FraudDetectionTemplate(channel="online banking", scope="real-time monitoring")


@pytest.fixture
def sample_manual_prompt() -> Prompt:
    """Return a prompt built by hand without any template."""
    return (
        PromptBuilder.new()
        .goal("Evaluate loan application")
        .role("Credit Analyst")
        .step("Review credit score and history")
        .step("Analyze income and debt ratios")
        .output("Approval recommendation with terms")
        .build()
    )
