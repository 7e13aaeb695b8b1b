"""Business rule validation for claim submissions."""

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal, InvalidOperation
from typing import Mapping, Union

from ..models.claim import POLICY_LIMITS, ClaimCategory, ClaimSubmission
from ..models.decision import RejectionKind, ValidationResult

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_LENGTH = 200
DATE_WINDOW_DAYS = 30

_ONE_DAY = timedelta(days=1)


class ClaimValidator:
    """
    Validates claim submissions against the form's business rules.

    Rules run in a fixed order and the first failure is reported:

    1. Completeness (category, description, receipt date, amount)
    2. Description length
    3. Date window between receipt and submission
    4. Amount ceiling for the category

    The validator holds only read-only settings, so one instance can be
    shared between concurrent submissions.
    """

    def __init__(
        self,
        limits: Mapping[ClaimCategory, Decimal] = POLICY_LIMITS,
        max_description_length: int = MAX_DESCRIPTION_LENGTH,
        date_window_days: int = DATE_WINDOW_DAYS
    ):
        self._limits = limits
        self._max_description_length = max_description_length
        self._date_window_days = date_window_days

    @classmethod
    def from_config(cls, config) -> "ClaimValidator":
        """Build a validator from a loaded Config."""
        return cls(
            limits=config.policy.limits,
            max_description_length=config.validation.max_description_length,
            date_window_days=config.validation.date_window_days,
        )

    @property
    def limits(self) -> Mapping[ClaimCategory, Decimal]:
        return self._limits

    @property
    def max_description_length(self) -> int:
        return self._max_description_length

    @property
    def date_window_days(self) -> int:
        return self._date_window_days

    def limit_for(self, category: Union[ClaimCategory, str]) -> Decimal:
        """Policy limit for a category (accepts the enum or its value)."""
        return self._limits[ClaimCategory(category)]

    def validate(self, submission: ClaimSubmission, now: Union[date, datetime]) -> ValidationResult:
        """
        Validate a submission at the given instant.

        Args:
            submission: Claim to validate (not modified)
            now: Submission time; a plain date is taken as midnight

        Returns:
            ValidationResult, accepted or rejected for the first failing rule
        """
        missing = submission.missing_fields()
        if missing:
            return self._reject(RejectionKind.MISSING_FIELDS, missing_fields=missing)

        length = len(submission.description)
        if length > self._max_description_length:
            return self._reject(RejectionKind.DESCRIPTION_TOO_LONG, description_length=length)

        days_apart = days_between(submission.receipt_date, now)
        if days_apart > self._date_window_days:
            return self._reject(RejectionKind.DATE_WINDOW_EXCEEDED, days_apart=days_apart)

        category = ClaimCategory(submission.category)
        limit = self._limits[category]
        if _as_decimal(submission.claim_amount) > limit:
            return self._reject(
                RejectionKind.AMOUNT_EXCEEDS_POLICY_LIMIT,
                category=category,
                limit=limit,
            )

        logger.debug(f"Claim accepted: category={category.value}")
        return ValidationResult.accepted()

    def _reject(self, reason: RejectionKind, **details) -> ValidationResult:
        logger.debug(f"Claim rejected: reason={reason.value}")
        return ValidationResult.rejected(reason, **details)


def days_between(receipt_date: Union[date, datetime], now: Union[date, datetime]) -> int:
    """
    Absolute distance between two instants in days, rounded up.

    Calendar dates are taken as midnight. Any partial day counts as a whole
    day, and the direction does not matter.
    """
    start = _as_datetime(receipt_date, now)
    end = _as_datetime(now, receipt_date)
    diff = abs(end - start)
    whole_days, remainder = divmod(diff, _ONE_DAY)
    return whole_days + (1 if remainder else 0)


def _as_datetime(value: Union[date, datetime], other: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        result = value
    else:
        result = datetime.combine(value, time.min)
    # Midnight of a calendar date belongs to the same zone as the other side
    if result.tzinfo is None and isinstance(other, datetime) and other.tzinfo is not None:
        result = result.replace(tzinfo=other.tzinfo)
    return result


def _as_decimal(amount) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, str):
        amount = amount.strip()
    try:
        return Decimal(str(amount))
    except InvalidOperation as e:
        raise ValueError(f"Claim amount is not numeric: {amount!r}") from e


_DEFAULT_VALIDATOR = ClaimValidator()


def validate(submission: ClaimSubmission, now: Union[date, datetime]) -> ValidationResult:
    """
    Validate a submission with the built-in policy limits and thresholds.

    Args:
        submission: Claim to validate
        now: Submission time

    Returns:
        ValidationResult for the submission
    """
    return _DEFAULT_VALIDATOR.validate(submission, now)
