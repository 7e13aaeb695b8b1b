"""Data models for claim submissions and their outcomes."""

from .claim import POLICY_LIMITS, ClaimCategory, ClaimSubmission
from .decision import RejectionKind, ValidationResult
from .feedback import FeedbackStatus, FormFeedback

__all__ = [
    'POLICY_LIMITS',
    'ClaimCategory',
    'ClaimSubmission',
    'RejectionKind',
    'ValidationResult',
    'FeedbackStatus',
    'FormFeedback',
]
