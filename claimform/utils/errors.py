"""Error handling utilities for the claim submission form."""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from enum import Enum


class ErrorType(Enum):
    """Enumeration of error types in the claim submission form."""

    # Configuration Errors
    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_INVALID = "CONFIG_INVALID"

    # Form Input Errors
    INVALID_CATEGORY = "INVALID_CATEGORY"
    INVALID_DESCRIPTION = "INVALID_DESCRIPTION"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    INVALID_DATE = "INVALID_DATE"

    # General Errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


@dataclass
class ErrorContext:
    """
    Context information for errors in the claim submission form.

    Attributes:
        error_type: Type of error from ErrorType enum
        message: Human-readable error message
        recoverable: Whether the user can correct the input and retry
        field: Optional form field the error relates to
        details: Optional additional error details
        original_exception: Optional original exception that caused this error
    """

    error_type: ErrorType
    message: str
    recoverable: bool
    field: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    original_exception: Optional[Exception] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error context to dictionary for logging/serialization.

        Returns:
            Dictionary representation of error context
        """
        return {
            "error_type": self.error_type.value,
            "message": self.message,
            "recoverable": self.recoverable,
            "field": self.field,
            "details": self.details or {},
            "original_exception": str(self.original_exception) if self.original_exception else None
        }


class ClaimFormError(Exception):
    """
    Base exception for all claim form errors.

    Business-rule violations are never raised; they are reported through
    ValidationResult. This hierarchy covers configuration and raw input
    that cannot be turned into a submission at all.

    Attributes:
        context: ErrorContext with detailed error information
    """

    def __init__(self, context: ErrorContext):
        self.context = context
        super().__init__(context.message)

    def __str__(self) -> str:
        base = f"{self.context.error_type.value}: {self.context.message}"
        if self.context.field:
            base += f" (field: {self.context.field})"
        return base

    def to_dict(self) -> Dict[str, Any]:
        return self.context.to_dict()


class ConfigurationError(ClaimFormError):
    """Exception for missing or malformed configuration."""

    @classmethod
    def missing_file(cls, config_path: str, error: Optional[Exception] = None) -> "ConfigurationError":
        """
        Create error for a configuration file that cannot be read.

        Args:
            config_path: Path to the configuration file
            error: Optional original exception

        Returns:
            ConfigurationError instance
        """
        context = ErrorContext(
            error_type=ErrorType.CONFIG_MISSING,
            message=f"Configuration file not found at '{config_path}'",
            recoverable=False,
            details={"config_path": config_path},
            original_exception=error
        )
        return cls(context)

    @classmethod
    def invalid_value(
        cls,
        key: str,
        value: Any,
        reason: str,
        error: Optional[Exception] = None
    ) -> "ConfigurationError":
        """
        Create error for a configuration value that is present but unusable.

        Args:
            key: Dotted configuration key (e.g. "policy.limits.Medical")
            value: Offending value
            reason: Why the value was rejected
            error: Optional original exception

        Returns:
            ConfigurationError instance
        """
        context = ErrorContext(
            error_type=ErrorType.CONFIG_INVALID,
            message=f"Invalid configuration value for '{key}': {reason}",
            recoverable=False,
            details={"key": key, "value": repr(value)},
            original_exception=error
        )
        return cls(context)


class FormInputError(ClaimFormError):
    """Exception for raw form values that cannot be coerced into a submission."""

    @classmethod
    def invalid_category(cls, value: Any) -> "FormInputError":
        context = ErrorContext(
            error_type=ErrorType.INVALID_CATEGORY,
            message=f"Unknown claim category '{value}'.",
            recoverable=True,
            field="category",
            details={"value": repr(value)}
        )
        return cls(context)

    @classmethod
    def invalid_description(cls, value: Any) -> "FormInputError":
        context = ErrorContext(
            error_type=ErrorType.INVALID_DESCRIPTION,
            message="Claim description must be text.",
            recoverable=True,
            field="description",
            details={"value": repr(value)}
        )
        return cls(context)

    @classmethod
    def invalid_amount(cls, value: Any, error: Optional[Exception] = None) -> "FormInputError":
        context = ErrorContext(
            error_type=ErrorType.INVALID_AMOUNT,
            message=f"Claim amount '{value}' is not a number.",
            recoverable=True,
            field="claim_amount",
            details={"value": repr(value)},
            original_exception=error
        )
        return cls(context)

    @classmethod
    def negative_amount(cls, value: Any) -> "FormInputError":
        context = ErrorContext(
            error_type=ErrorType.NEGATIVE_AMOUNT,
            message="Claim amount cannot be negative.",
            recoverable=True,
            field="claim_amount",
            details={"value": repr(value)}
        )
        return cls(context)

    @classmethod
    def invalid_date(cls, value: Any, error: Optional[Exception] = None) -> "FormInputError":
        context = ErrorContext(
            error_type=ErrorType.INVALID_DATE,
            message=f"Receipt date '{value}' is not a valid date (expected YYYY-MM-DD).",
            recoverable=True,
            field="receipt_date",
            details={"value": repr(value)},
            original_exception=error
        )
        return cls(context)


def handle_form_input_error(error: FormInputError, logger) -> str:
    """
    Log a form input error and return the message to show the user.

    Args:
        error: Coercion failure raised for a raw form value
        logger: Logger instance for error logging

    Returns:
        User-facing message for the error banner
    """
    logger.warning(f"Form input rejected: {error}")
    return error.context.message
