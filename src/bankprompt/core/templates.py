"""Banking templates - parameterized recipes that pre-fill a PromptBuilder.

Each template variant expands to a fixed sequence of sections, with its
fields substituted literally into the goal line. Templates are immutable
input data and keep no reference to the builders they produce.

Templates round-trip through JSON; ``parse_template`` uses the ``kind``
discriminator to pick the right variant.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .domain_types import PromptBuilder


class CreditRiskTemplate(BaseModel):
    """Credit risk assessment and loan evaluation.

    Attributes:
        loan_type: Product being assessed (e.g. "mortgage").
        focus: What the assessment concentrates on (e.g. "default risk").
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["credit_risk"] = "credit_risk"
    loan_type: str
    focus: str

    def to_builder(self) -> PromptBuilder:
        """Create a pre-configured prompt builder."""
        return (
            PromptBuilder.new()
            .goal(f"Assess credit risk for {self.loan_type} focusing on {self.focus}")
            .role("Senior Credit Risk Analyst")
            .step("Analyze credit history and payment patterns")
            .step("Evaluate income stability and debt ratios")
            .step("Calculate default probability and risk rating")
            .step("Determine loan terms and interest rates")
            .output("Risk assessment with approval recommendation")
        )

    def description(self) -> str:
        """One-line summary for logs. Never part of the rendered prompt."""
        return f"Assesses credit risk for {self.loan_type} focusing on {self.focus}"


class FraudDetectionTemplate(BaseModel):
    """Fraud detection and prevention.

    Attributes:
        channel: Where transactions originate (e.g. "online banking").
        scope: Detection approach (e.g. "real-time monitoring").
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["fraud_detection"] = "fraud_detection"
    channel: str
    scope: str

    def to_builder(self) -> PromptBuilder:
        """Create a pre-configured prompt builder."""
        return (
            PromptBuilder.new()
            .goal(f"Detect fraud in {self.channel} using {self.scope}")
            .role("Fraud Detection Specialist")
            .step("Analyze transaction patterns and anomalies")
            .step("Apply fraud scoring models")
            .step("Check against known risk indicators")
            .step("Generate alerts and recommended actions")
            .output("Fraud risk assessment with action plan")
        )

    def description(self) -> str:
        """One-line summary for logs. Never part of the rendered prompt."""
        return f"Detects fraud in {self.channel} using {self.scope}"


Template = Annotated[
    CreditRiskTemplate | FraudDetectionTemplate,
    Field(discriminator="kind"),
]

_template_adapter: TypeAdapter[Template] = TypeAdapter(Template)


def parse_template(data: dict[str, Any]) -> CreditRiskTemplate | FraudDetectionTemplate:
    """Validate a plain dict into the matching template variant.

    Args:
        data: Mapping with a ``kind`` key of "credit_risk" or
            "fraud_detection" plus that variant's fields.

    Returns:
        The parsed template.

    Raises:
        pydantic.ValidationError: If the kind is unknown or fields are missing.
    """
    return _template_adapter.validate_python(data)
