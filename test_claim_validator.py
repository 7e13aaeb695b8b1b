"""Tests for the claim validation rules and their evaluation order."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from types import MappingProxyType

import pytest

from claimform.models.claim import POLICY_LIMITS, ClaimCategory, ClaimSubmission
from claimform.models.decision import RejectionKind, ValidationResult
from claimform.validation.validator import ClaimValidator, days_between, validate


NOW = datetime(2024, 6, 30)


def make_submission(**overrides) -> ClaimSubmission:
    fields = {
        "category": ClaimCategory.TELEPHONE,
        "description": "Monthly mobile bill",
        "receipt_date": NOW.date() - timedelta(days=5),
        "claim_amount": Decimal("250.00"),
    }
    fields.update(overrides)
    return ClaimSubmission(**fields)


def test_valid_submission_is_accepted():
    result = validate(make_submission(), NOW)

    assert result.is_accepted
    assert result.reason is None
    assert result == ValidationResult.accepted()


@pytest.mark.parametrize("field_name", ["category", "description", "receipt_date", "claim_amount"])
def test_any_missing_field_is_reported(field_name):
    result = validate(make_submission(**{field_name: None}), NOW)

    assert result.reason is RejectionKind.MISSING_FIELDS
    assert result.missing_fields == (field_name,)


@pytest.mark.parametrize("field_name", ["category", "description", "claim_amount"])
def test_empty_text_counts_as_missing(field_name):
    result = validate(make_submission(**{field_name: ""}), NOW)

    assert result.reason is RejectionKind.MISSING_FIELDS


def test_all_missing_fields_are_listed_in_form_order():
    result = validate(ClaimSubmission(), NOW)

    assert result.reason is RejectionKind.MISSING_FIELDS
    assert result.missing_fields == ("category", "description", "receipt_date", "claim_amount")


def test_zero_amount_is_present():
    result = validate(make_submission(claim_amount=0), NOW)

    assert result.is_accepted


def test_description_at_limit_is_accepted():
    assert validate(make_submission(description="x" * 200), NOW).is_accepted


def test_description_over_limit_is_rejected():
    result = validate(make_submission(description="x" * 201), NOW)

    assert result.reason is RejectionKind.DESCRIPTION_TOO_LONG
    assert result.description_length == 201


def test_receipt_thirty_days_old_is_inside_window():
    result = validate(make_submission(receipt_date=NOW.date() - timedelta(days=30)), NOW)

    assert result.reason is not RejectionKind.DATE_WINDOW_EXCEEDED


def test_receipt_thirty_one_days_old_is_outside_window():
    result = validate(make_submission(receipt_date=NOW.date() - timedelta(days=31)), NOW)

    assert result.reason is RejectionKind.DATE_WINDOW_EXCEEDED
    assert result.days_apart == 31


def test_partial_day_counts_as_whole_day():
    later = NOW + timedelta(seconds=1)
    result = validate(make_submission(receipt_date=NOW.date() - timedelta(days=30)), later)

    assert result.reason is RejectionKind.DATE_WINDOW_EXCEEDED
    assert result.days_apart == 31


def test_date_window_is_symmetric():
    past = validate(make_submission(receipt_date=NOW.date() - timedelta(days=31)), NOW)
    future = validate(make_submission(receipt_date=NOW.date() + timedelta(days=31)), NOW)

    assert past.reason is future.reason is RejectionKind.DATE_WINDOW_EXCEEDED
    assert validate(make_submission(receipt_date=NOW.date() + timedelta(days=3)), NOW).is_accepted


def test_days_between_rounds_up_and_ignores_direction():
    assert days_between(date(2024, 6, 1), date(2024, 6, 1)) == 0
    assert days_between(date(2024, 6, 1), datetime(2024, 6, 1, 0, 0, 1)) == 1
    assert days_between(date(2024, 6, 10), date(2024, 6, 1)) == 9
    assert days_between(datetime(2024, 6, 1, 12), datetime(2024, 6, 3, 11)) == 2


def test_days_between_with_aware_now():
    now = datetime(2024, 6, 30, tzinfo=timezone.utc)

    assert days_between(date(2024, 5, 31), now) == 30


def test_telephone_limit_is_inclusive():
    assert validate(make_submission(claim_amount=1000), NOW).is_accepted


def test_telephone_amount_over_limit_is_rejected():
    result = validate(make_submission(claim_amount=1000.01), NOW)

    assert result.reason is RejectionKind.AMOUNT_EXCEEDS_POLICY_LIMIT
    assert result.category is ClaimCategory.TELEPHONE
    assert result.limit == Decimal("1000")


def test_medical_limit_is_inclusive():
    submission = make_submission(category=ClaimCategory.MEDICAL, claim_amount=5000)

    assert validate(submission, NOW).is_accepted


def test_travel_amount_over_limit_is_rejected():
    submission = make_submission(category=ClaimCategory.TRAVEL, claim_amount=25001)
    result = validate(submission, NOW)

    assert result.reason is RejectionKind.AMOUNT_EXCEEDS_POLICY_LIMIT
    assert result.category is ClaimCategory.TRAVEL
    assert result.limit == Decimal("25000")


def test_text_amounts_compare_numerically():
    # "3000" sorts after "25000" as text but is well under the Travel limit
    travel = make_submission(category=ClaimCategory.TRAVEL, claim_amount="3000")
    internet = make_submission(category=ClaimCategory.INTERNET, claim_amount="1000.5")

    assert validate(travel, NOW).is_accepted
    assert validate(internet, NOW).reason is RejectionKind.AMOUNT_EXCEEDS_POLICY_LIMIT


def test_category_given_as_plain_text_is_looked_up():
    submission = make_submission(category="Medical", claim_amount=4999)

    assert validate(submission, NOW).is_accepted


def test_missing_field_wins_over_amount_limit():
    submission = make_submission(description=None, claim_amount=1_000_000)

    assert validate(submission, NOW).reason is RejectionKind.MISSING_FIELDS


def test_rules_short_circuit_in_order():
    too_long_and_old = make_submission(
        description="x" * 300,
        receipt_date=NOW.date() - timedelta(days=90),
        claim_amount=1_000_000,
    )
    old_and_over_limit = make_submission(
        receipt_date=NOW.date() - timedelta(days=90),
        claim_amount=1_000_000,
    )

    assert validate(too_long_and_old, NOW).reason is RejectionKind.DESCRIPTION_TOO_LONG
    assert validate(old_and_over_limit, NOW).reason is RejectionKind.DATE_WINDOW_EXCEEDED


def test_validation_is_idempotent_and_leaves_input_untouched():
    submission = make_submission(claim_amount="1200")
    before = ClaimSubmission(**vars(submission))

    first = validate(submission, NOW)
    second = validate(submission, NOW)

    assert first == second
    assert submission == before


def test_custom_limits_and_thresholds():
    limits = MappingProxyType({category: Decimal("10") for category in ClaimCategory})
    validator = ClaimValidator(limits=limits, max_description_length=5, date_window_days=2)

    over_limit = make_submission(claim_amount=11, description="ok", receipt_date=NOW.date())

    assert validator.validate(over_limit, NOW).limit == Decimal("10")
    assert validator.validate(make_submission(description="too long"), NOW).reason is RejectionKind.DESCRIPTION_TOO_LONG
    assert validator.validate(
        make_submission(description="ok", claim_amount=1), NOW
    ).reason is RejectionKind.DATE_WINDOW_EXCEEDED


def test_default_limits_table_is_read_only():
    with pytest.raises(TypeError):
        POLICY_LIMITS[ClaimCategory.TRAVEL] = Decimal("1")

    assert ClaimValidator().limit_for("Travel") == Decimal("25000")


def test_result_to_dict():
    result = validate(make_submission(category=ClaimCategory.TRAVEL, claim_amount=30000), NOW)

    assert result.to_dict() == {
        "accepted": False,
        "reason": "AMOUNT_EXCEEDS_POLICY_LIMIT",
        "category": "Travel",
        "limit": "25000",
        "missing_fields": [],
        "description_length": None,
        "days_apart": None,
    }
