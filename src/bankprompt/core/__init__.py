"""Core domain - prompt data model, templates, interfaces and exceptions."""

from .domain_types import Prompt, PromptBuilder, Section, SectionKind
from .exceptions import BankPromptError, ConfigurationError, GenerationFailure
from .interfaces import GenerationBackend
from .templates import (
    CreditRiskTemplate,
    FraudDetectionTemplate,
    Template,
    parse_template,
)

__all__ = [
    # Data model
    "Prompt",
    "PromptBuilder",
    "Section",
    "SectionKind",
    # Templates
    "CreditRiskTemplate",
    "FraudDetectionTemplate",
    "Template",
    "parse_template",
    # Interfaces
    "GenerationBackend",
    # Exceptions
    "BankPromptError",
    "ConfigurationError",
    "GenerationFailure",
]
