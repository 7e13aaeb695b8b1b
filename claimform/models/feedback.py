"""Form feedback state shown after a submission attempt."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional


class FeedbackStatus(Enum):
    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FormFeedback:
    """
    Banner state the form displays after a submission.

    A successful submission carries ``reset_at``; once that instant has passed
    the form clears its fields and the banner. Errors stay until the next
    submission or a manual reset.

    Attributes:
        status: Current banner state
        message: Text to display (empty when idle)
        reset_at: When the form should reset itself, if ever
    """
    status: FeedbackStatus = FeedbackStatus.IDLE
    message: str = ""
    reset_at: Optional[datetime] = None

    @classmethod
    def success(cls, message: str, now: datetime, reset_delay_seconds: float) -> "FormFeedback":
        return cls(
            status=FeedbackStatus.SUCCESS,
            message=message,
            reset_at=now + timedelta(seconds=reset_delay_seconds),
        )

    @classmethod
    def error(cls, message: str) -> "FormFeedback":
        return cls(status=FeedbackStatus.ERROR, message=message)

    @classmethod
    def cleared(cls) -> "FormFeedback":
        return cls()

    def is_expired(self, now: datetime) -> bool:
        """True when a scheduled reset is due."""
        return self.reset_at is not None and now >= self.reset_at
