"""Use case turning validated form input into record mutations."""

from dataclasses import dataclass
from typing import Any

from src.application.forms import FORMS_BY_ENTITY, validate_form
from src.application.use_cases.record_access import RecordAccessUseCase
from src.infrastructure.logging.logger import get_app_logger

_ENTITY_NOUNS = {
    "assets": "Asset",
    "debts": "Debt",
    "family_members": "Family member",
    "family_assets": "Asset",
    "family_debts": "Debt",
}


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a successful form submission.

    Attributes:
        record: Record as confirmed by the store.
        created: True for inserts, False for updates.
        message: Confirmation text for a toast notification.
    """

    record: Any
    created: bool
    message: str


class SubmitRecordUseCase:
    """Validate form input, then create or update a record."""

    def __init__(self, access: RecordAccessUseCase, logger=None) -> None:
        """Initialize the use case.

        Args:
            access: Record access use case for the form's entity.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._access = access
        self._form_cls = FORMS_BY_ENTITY[access.entity]
        self._logger = logger or get_app_logger()

    def execute(
        self,
        data: dict[str, Any],
        record_id: str | None = None,
    ) -> SubmissionResult:
        """Submit the form.

        New records are validated as a whole; edits validate and write only
        the fields present in ``data``, so stored values the form does not
        show (such as metadata) are kept.

        Args:
            data: Raw field values from the UI.
            record_id: Identifier of the record being edited, if any.

        Returns:
            SubmissionResult: Confirmed record and a confirmation message.

        Raises:
            RecordValidationError: If the input fails validation.
            AuthenticationError: If no session is active.
            RemoteOperationError: If the store rejects the mutation.
        """
        fields = validate_form(
            self._form_cls,
            data,
            partial=record_id is not None,
        )
        noun = _ENTITY_NOUNS.get(self._access.entity, "Record")
        if record_id is None:
            record = self._access.create(fields)
            message = f"{noun} added successfully"
        else:
            record = self._access.update(record_id, fields)
            message = f"{noun} updated successfully"
        self._logger.info(message)
        return SubmissionResult(
            record=record,
            created=record_id is None,
            message=message,
        )


__all__ = ["SubmitRecordUseCase", "SubmissionResult"]
