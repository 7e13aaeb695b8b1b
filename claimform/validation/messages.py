"""User-facing text for validation outcomes."""

from typing import Dict

from ..models.decision import RejectionKind, ValidationResult

SUCCESS_MESSAGE = "Successfully submitted"

MESSAGE_TEMPLATES: Dict[RejectionKind, str] = {
    RejectionKind.MISSING_FIELDS: "All fields are mandatory.",
    RejectionKind.DESCRIPTION_TOO_LONG: (
        "Claim description should not be more than {max_length} characters."
    ),
    RejectionKind.DATE_WINDOW_EXCEEDED: (
        "Difference between the Receipt date and submission date "
        "should not be more than {window_days} days."
    ),
    RejectionKind.AMOUNT_EXCEEDS_POLICY_LIMIT: (
        "Claim amount should not be greater than max policy amount "
        "for {category} category."
    ),
}


def describe(
    result: ValidationResult,
    max_length: int = 200,
    window_days: int = 30
) -> str:
    """
    Message the form shows for a validation result.

    Args:
        result: Outcome returned by the validator
        max_length: Description limit the validator enforced
        window_days: Date window the validator enforced

    Returns:
        Banner text
    """
    if result.is_accepted:
        return SUCCESS_MESSAGE
    template = MESSAGE_TEMPLATES[result.reason]
    return template.format(
        max_length=max_length,
        window_days=window_days,
        category=result.category.value if result.category else "",
    )


def describe_for(result: ValidationResult, validator) -> str:
    """Message for a result, using the thresholds of the validator that produced it."""
    return describe(
        result,
        max_length=validator.max_description_length,
        window_days=validator.date_window_days,
    )


def format_limit(limit) -> str:
    """Render a policy limit without trailing zeros (25000, 99.5)."""
    text = f"{limit:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
