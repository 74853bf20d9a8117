"""Error taxonomy surfaced by application use cases."""


class FinanceTrackerError(RuntimeError):
    """Base class for errors surfaced to the user interface."""


class RecordValidationError(FinanceTrackerError, ValueError):
    """Raised when submitted fields fail form validation.

    Attributes:
        field_errors: Message per offending field, for inline display.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        summary = "; ".join(
            f"{name}: {message}" for name, message in self.field_errors.items()
        )
        super().__init__(f"Invalid input ({summary})")


class AuthenticationError(FinanceTrackerError):
    """Raised when the acting user has no active session."""


class RemoteOperationError(FinanceTrackerError):
    """Raised when the record store rejects a read or mutation."""


__all__ = [
    "FinanceTrackerError",
    "RecordValidationError",
    "AuthenticationError",
    "RemoteOperationError",
]
