"""Validation outcome data models."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .claim import ClaimCategory


class RejectionKind(Enum):
    """Reasons a submission can be rejected, in rule evaluation order."""

    MISSING_FIELDS = "MISSING_FIELDS"
    DESCRIPTION_TOO_LONG = "DESCRIPTION_TOO_LONG"
    DATE_WINDOW_EXCEEDED = "DATE_WINDOW_EXCEEDED"
    AMOUNT_EXCEEDS_POLICY_LIMIT = "AMOUNT_EXCEEDS_POLICY_LIMIT"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one claim submission.

    Either accepted (``reason`` is None) or rejected for exactly one reason,
    the first rule the submission violated.

    Attributes:
        reason: Rejection kind, or None when accepted
        category: Category checked against the policy limit (amount rejections)
        limit: Policy limit for that category (amount rejections)
        missing_fields: Names of the absent fields (completeness rejections)
        description_length: Length of the description (length rejections)
        days_apart: Whole days between receipt and submission (date rejections)
    """
    reason: Optional[RejectionKind] = None
    category: Optional[ClaimCategory] = None
    limit: Optional[Decimal] = None
    missing_fields: Tuple[str, ...] = field(default_factory=tuple)
    description_length: Optional[int] = None
    days_apart: Optional[int] = None

    @classmethod
    def accepted(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def rejected(cls, reason: RejectionKind, **details: Any) -> "ValidationResult":
        return cls(reason=reason, **details)

    @property
    def is_accepted(self) -> bool:
        return self.reason is None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert result to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the result
        """
        return {
            "accepted": self.is_accepted,
            "reason": self.reason.value if self.reason else None,
            "category": self.category.value if self.category else None,
            "limit": str(self.limit) if self.limit is not None else None,
            "missing_fields": list(self.missing_fields),
            "description_length": self.description_length,
            "days_apart": self.days_apart,
        }
