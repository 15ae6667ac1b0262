"""Domain-specific exceptions. Pure domain layer, no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MalformedLocationReference(DomainError):
    """Raised when a location string cannot be parsed into a RecordId."""


class InvalidOperationContext(DomainError):
    """Raised when a rewrite context has no usable target. Caller bug; never retried."""


class InvalidClassificationError(DomainError):
    """Raised when a classification strategy yields no reason codes."""
