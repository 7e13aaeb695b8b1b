"""Insurance claim submission form: validation core and form support."""

from .models import ClaimCategory, ClaimSubmission, RejectionKind, ValidationResult
from .validation import ClaimValidator, validate

__all__ = [
    'ClaimCategory',
    'ClaimSubmission',
    'RejectionKind',
    'ValidationResult',
    'ClaimValidator',
    'validate',
]
