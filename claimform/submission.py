"""
Submission entry point for the claim form.

This module provides submit_claim, which the form shell calls with the raw
field values. It coerces them, runs the validator and returns the banner
state to display. Nothing is stored or sent anywhere.
"""

from __future__ import annotations
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .models.decision import ValidationResult
from .models.feedback import FormFeedback
from .utils.config import Config
from .utils.errors import ConfigurationError, ErrorType, FormInputError, handle_form_input_error
from .utils.logging import set_context, setup_logging_from_config, with_context
from .validation.coercion import coerce_form
from .validation.messages import describe_for
from .validation.validator import ClaimValidator

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Global instances (initialized on first use)
_config: Optional[Config] = None
_validator: Optional[ClaimValidator] = None


@dataclass(frozen=True)
class SubmissionOutcome:
    """
    Result of one submission attempt.

    Attributes:
        submission_id: Identifier used to correlate log lines for this attempt
        result: Validator outcome, or None when the raw input could not be read
        feedback: Banner state for the form
    """
    submission_id: str
    result: Optional[ValidationResult]
    feedback: FormFeedback

    @property
    def accepted(self) -> bool:
        return self.result is not None and self.result.is_accepted


def initialize(config_path: str = "config.yaml", config: Optional[Config] = None) -> Config:
    """
    Load configuration, set up logging and build the shared validator.

    Falls back to built-in defaults when the configuration file does not
    exist. A file that exists but is malformed is an error.

    Args:
        config_path: Path to YAML configuration file
        config: Already-loaded configuration to use instead of the file

    Returns:
        The active configuration
    """
    global _config, _validator

    if config is None:
        try:
            config = Config.load(config_path)
        except ConfigurationError as e:
            if e.context.error_type is not ErrorType.CONFIG_MISSING:
                raise
            config = Config.defaults()
            setup_logging_from_config(config.logging)
            logger.warning(f"{e}; using built-in defaults")
        else:
            setup_logging_from_config(config.logging)
    else:
        setup_logging_from_config(config.logging)

    _config = config
    _validator = ClaimValidator.from_config(config)
    limits = {c.value: str(v) for c, v in config.policy.limits.items()}
    logger.info(
        f"Claim form initialized: limits={limits}, "
        f"window_days={config.validation.date_window_days}"
    )
    return _config


def get_config() -> Config:
    if _config is None:
        initialize()
    return _config


def get_validator() -> ClaimValidator:
    if _validator is None:
        initialize()
    return _validator


@with_context(component="submission")
def submit_claim(values: Dict[str, Any], now: Optional[datetime] = None) -> SubmissionOutcome:
    """
    Validate a claim form submission.

    Args:
        values: Raw form values keyed by "category", "description",
            "receipt_date" and "claim_amount"
        now: Submission time (defaults to the current local time)

    Returns:
        SubmissionOutcome with the validation result and banner state
    """
    config = get_config()
    validator = get_validator()
    now = now or datetime.now()
    submission_id = f"SUB-{uuid.uuid4().hex[:8].upper()}"

    set_context(submission_id=submission_id)

    try:
        submission = coerce_form(values)
    except FormInputError as e:
        message = handle_form_input_error(e, logger)
        return SubmissionOutcome(submission_id, None, FormFeedback.error(message))

    result = validator.validate(submission, now)
    message = describe_for(result, validator)

    if result.is_accepted:
        logger.info(f"Claim accepted: category={submission.category.value}")
        feedback = FormFeedback.success(message, now, config.form.reset_delay_seconds)
    else:
        logger.info(f"Claim rejected: {result.to_dict()}")
        feedback = FormFeedback.error(message)

    return SubmissionOutcome(submission_id, result, feedback)
