"""Generation adapters implementing the GenerationBackend protocol."""

from .mock import (
    CREDIT_ANALYSIS_RESPONSE,
    FRAUD_ALERT_RESPONSE,
    GENERIC_RESPONSE,
    MockGenerationBackend,
)

__all__ = [
    "MockGenerationBackend",
    "CREDIT_ANALYSIS_RESPONSE",
    "FRAUD_ALERT_RESPONSE",
    "GENERIC_RESPONSE",
]
