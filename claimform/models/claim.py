"""Claim submission data models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class ClaimCategory(str, Enum):
    """Claim categories offered by the form."""

    TELEPHONE = "Telephone"
    INTERNET = "Internet"
    MEDICAL = "Medical"
    TRAVEL = "Travel"


Amount = Union[int, float, Decimal, str]


# Maximum reimbursable amount per category.
POLICY_LIMITS: Mapping[ClaimCategory, Decimal] = MappingProxyType({
    ClaimCategory.TELEPHONE: Decimal("1000"),
    ClaimCategory.INTERNET: Decimal("1000"),
    ClaimCategory.MEDICAL: Decimal("5000"),
    ClaimCategory.TRAVEL: Decimal("25000"),
})


@dataclass(frozen=True)
class ClaimSubmission:
    """
    A single claim submission attempt.

    Fields left blank on the form are ``None``. The record is immutable and
    is passed by value into the validator.

    Attributes:
        category: Claim category governing the policy limit
        description: Free-text description, at most 200 characters
        receipt_date: Date on the receipt (a datetime is also accepted)
        claim_amount: Non-negative amount claimed
    """
    category: Optional[ClaimCategory] = None
    description: Optional[str] = None
    receipt_date: Optional[date] = None
    claim_amount: Optional[Amount] = None

    def missing_fields(self) -> tuple:
        """Return the names of fields that are absent or empty, in form order."""
        missing = []
        if not self.category:
            missing.append("category")
        if not self.description:
            missing.append("description")
        if self.receipt_date is None:
            missing.append("receipt_date")
        if self.claim_amount is None or (
            isinstance(self.claim_amount, str) and not self.claim_amount.strip()
        ):
            missing.append("claim_amount")
        return tuple(missing)
