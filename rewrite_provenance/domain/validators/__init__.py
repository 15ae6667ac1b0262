"""Domain validators. Pure functions."""

from rewrite_provenance.domain.validators.context_validator import (
    validate_reason_codes,
    validate_rewrite_context,
)

__all__ = ["validate_reason_codes", "validate_rewrite_context"]
