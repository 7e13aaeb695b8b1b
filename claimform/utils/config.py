"""Configuration management for the claim submission form."""

import os
import yaml
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from ..models.claim import POLICY_LIMITS, ClaimCategory
from .errors import ConfigurationError
from .logging import DEFAULT_LOG_FORMAT


DEFAULT_CURRENCIES = ["INR", "USD", "EUR", "GBP"]


@dataclass
class PolicyConfig:
    """Per-category policy limits."""
    limits: Mapping[ClaimCategory, Decimal] = field(default_factory=lambda: POLICY_LIMITS)


@dataclass
class ValidationConfig:
    """Business rule thresholds."""
    max_description_length: int = 200
    date_window_days: int = 30


@dataclass
class FormConfig:
    """Form shell behaviour."""
    reset_delay_seconds: float = 7.0
    currencies: List[str] = field(default_factory=lambda: list(DEFAULT_CURRENCIES))


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file: str = ""


@dataclass
class Config:
    """Main configuration class."""
    policy: PolicyConfig
    validation: ValidationConfig
    form: FormConfig
    logging: LoggingConfig

    @classmethod
    def defaults(cls) -> "Config":
        """Configuration used when no file is supplied."""
        return cls(
            policy=PolicyConfig(),
            validation=ValidationConfig(),
            form=FormConfig(),
            logging=LoggingConfig(),
        )

    @classmethod
    def load(cls, config_path: str = "config.yaml") -> "Config":
        """
        Load configuration from file and environment variables.

        Environment variables override config file values:
        - CLAIM_FORM_RESET_DELAY
        - LOG_LEVEL
        - LOG_FILE

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Config instance with loaded settings

        Raises:
            ConfigurationError: If the file is missing or holds unusable values
        """
        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise ConfigurationError.missing_file(config_path, e)
        except yaml.YAMLError as e:
            raise ConfigurationError.invalid_value(config_path, None, "not valid YAML", e)

        if not isinstance(config_data, dict):
            raise ConfigurationError.invalid_value(config_path, config_data, "expected a mapping at the top level")

        policy_data = config_data.get("policy", {}) or {}
        validation_data = config_data.get("validation", {}) or {}
        form_data = config_data.get("form", {}) or {}
        logging_data = config_data.get("logging", {}) or {}

        policy_config = PolicyConfig(
            limits=_parse_limits(policy_data.get("limits"))
        )

        validation_config = ValidationConfig(
            max_description_length=_positive_int(
                "validation.max_description_length",
                validation_data.get("max_description_length", 200)
            ),
            date_window_days=_positive_int(
                "validation.date_window_days",
                validation_data.get("date_window_days", 30)
            ),
        )

        reset_delay = os.getenv("CLAIM_FORM_RESET_DELAY", form_data.get("reset_delay_seconds", 7))
        try:
            reset_delay = float(reset_delay)
        except (TypeError, ValueError) as e:
            raise ConfigurationError.invalid_value("form.reset_delay_seconds", reset_delay, "not a number", e)
        if reset_delay < 0:
            raise ConfigurationError.invalid_value("form.reset_delay_seconds", reset_delay, "must not be negative")

        form_config = FormConfig(
            reset_delay_seconds=reset_delay,
            currencies=list(form_data.get("currencies") or DEFAULT_CURRENCIES),
        )

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", logging_data.get("level", "INFO")),
            format=logging_data.get("format", LoggingConfig.format),
            file=os.getenv("LOG_FILE", logging_data.get("file", "")) or "",
        )

        return cls(
            policy=policy_config,
            validation=validation_config,
            form=form_config,
            logging=logging_config,
        )


def _parse_limits(raw: Any) -> Mapping[ClaimCategory, Decimal]:
    """
    Build the read-only policy limit table from a YAML mapping.

    Every category must be present; unknown keys are rejected so a typo
    cannot silently leave a category on its default.
    """
    if raw is None:
        return POLICY_LIMITS
    if not isinstance(raw, dict):
        raise ConfigurationError.invalid_value("policy.limits", raw, "expected a mapping of category to amount")

    limits: Dict[ClaimCategory, Decimal] = {}
    for key, value in raw.items():
        try:
            category = ClaimCategory(key)
        except ValueError as e:
            raise ConfigurationError.invalid_value(f"policy.limits.{key}", value, "unknown category", e)
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise ConfigurationError.invalid_value(f"policy.limits.{key}", value, "not a number", e)
        if isinstance(value, bool) or not amount.is_finite() or amount < 0:
            raise ConfigurationError.invalid_value(f"policy.limits.{key}", value, "must be a non-negative amount")
        limits[category] = amount

    missing = [c.value for c in ClaimCategory if c not in limits]
    if missing:
        raise ConfigurationError.invalid_value("policy.limits", raw, f"missing categories: {', '.join(missing)}")

    return MappingProxyType(limits)


def _positive_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError.invalid_value(key, value, "expected a positive integer")
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError.invalid_value(key, value, "expected a positive integer", e)
    if number <= 0:
        raise ConfigurationError.invalid_value(key, value, "expected a positive integer")
    return number
