"""Turn raw form values into a ClaimSubmission."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..models.claim import ClaimCategory, ClaimSubmission
from ..utils.errors import FormInputError


def coerce_submission(
    category: Any = None,
    description: Any = None,
    receipt_date: Any = None,
    claim_amount: Any = None
) -> ClaimSubmission:
    """
    Build a submission from values as the form delivers them.

    Blank values become ``None`` so the validator reports them as missing.
    Values that are present but malformed raise FormInputError.

    Args:
        category: Category name or ClaimCategory
        description: Description text, kept verbatim; must be a string
        receipt_date: date, datetime or ISO "YYYY-MM-DD" text
        claim_amount: Number or numeric text

    Returns:
        ClaimSubmission ready for validation

    Raises:
        FormInputError: If a present value cannot be interpreted
    """
    return ClaimSubmission(
        category=parse_category(category),
        description=parse_description(description),
        receipt_date=parse_receipt_date(receipt_date),
        claim_amount=parse_amount(claim_amount),
    )


def coerce_form(values: dict) -> ClaimSubmission:
    """Build a submission from a mapping keyed by form field name."""
    return coerce_submission(
        category=values.get("category"),
        description=values.get("description"),
        receipt_date=values.get("receipt_date"),
        claim_amount=values.get("claim_amount"),
    )


def parse_category(value: Any) -> Optional[ClaimCategory]:
    if _is_blank(value):
        return None
    if isinstance(value, ClaimCategory):
        return value
    if isinstance(value, str):
        wanted = value.strip().lower()
        for category in ClaimCategory:
            if category.value.lower() == wanted:
                return category
    raise FormInputError.invalid_category(value)


def parse_description(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise FormInputError.invalid_description(value)
    return value


def parse_receipt_date(value: Any) -> Optional[date]:
    if _is_blank(value):
        return None
    if isinstance(value, (date, datetime)):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise FormInputError.invalid_date(value, e)
    raise FormInputError.invalid_date(value)


def parse_amount(value: Any) -> Optional[Decimal]:
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        raise FormInputError.invalid_amount(value)
    if isinstance(value, (int, float, Decimal, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise FormInputError.invalid_amount(value, e)
    else:
        raise FormInputError.invalid_amount(value)

    if not amount.is_finite():
        raise FormInputError.invalid_amount(value)
    if amount < 0:
        raise FormInputError.negative_amount(value)
    return amount


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
