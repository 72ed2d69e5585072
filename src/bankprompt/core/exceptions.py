"""Domain-specific exceptions.

All exceptions in the bankprompt library inherit from BankPromptError,
making it easy to catch all library errors while still being able
to handle specific error types.

The prompt data model itself never raises: any text is a legal section
payload and any string is a legal template field.
"""

from __future__ import annotations


class BankPromptError(Exception):
    """Base exception for all bankprompt errors.

    All custom exceptions in the library should inherit from this class
    to enable catching all bankprompt-specific errors with a single except clause.
    """

    pass


class GenerationFailure(BankPromptError):
    """A generation backend could not produce a response.

    Raised by GenerationBackend implementations, e.g. on transport failure.
    The failure is fatal to the single in-flight request only and is never
    retried inside the library; it propagates unchanged to the caller.

    Attributes:
        retryable: Whether the caller may reasonably retry the request.
    """

    def __init__(self, message: str, retryable: bool = True) -> None:
        """Initialize GenerationFailure.

        Args:
            message: Error description.
            retryable: Whether error is transient and retryable.
        """
        super().__init__(message)
        self.retryable = retryable


class ConfigurationError(BankPromptError):
    """Settings could not be turned into a working component.

    Raised when:
    - The configured backend name is not registered
    - A numeric setting cannot be parsed or is negative
    """

    pass
