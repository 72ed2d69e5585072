"""bankprompt - structured prompt building for banking workflows.

Build prompts from Goal, Role, Step and Output sections with a fluent
builder, or start from a credit risk or fraud detection template, then
send the rendered text to any GenerationBackend.
"""

from bankprompt.adapters.generation import MockGenerationBackend
from bankprompt.core import (
    BankPromptError,
    ConfigurationError,
    CreditRiskTemplate,
    FraudDetectionTemplate,
    GenerationBackend,
    GenerationFailure,
    Prompt,
    PromptBuilder,
    Section,
    SectionKind,
    Template,
    parse_template,
)
from bankprompt.services import GenerationService

__all__ = [
    "BankPromptError",
    "ConfigurationError",
    "CreditRiskTemplate",
    "FraudDetectionTemplate",
    "GenerationBackend",
    "GenerationFailure",
    "GenerationService",
    "MockGenerationBackend",
    "Prompt",
    "PromptBuilder",
    "Section",
    "SectionKind",
    "Template",
    "parse_template",
]
