"""Claim validation rules, input coercion and outcome messages."""

from .validator import ClaimValidator, validate, days_between
from .coercion import coerce_submission, coerce_form
from .messages import describe, describe_for, SUCCESS_MESSAGE

__all__ = [
    'ClaimValidator',
    'validate',
    'days_between',
    'coerce_submission',
    'coerce_form',
    'describe',
    'describe_for',
    'SUCCESS_MESSAGE',
]
