"""
Feedback submission pipeline.

Received -> Validated -> Sanitized -> Persisted on success; Received ->
Rejected when a validator fails; Received -> Validated -> Sanitized ->
StoreFailed when the insert fails. The outcome is returned to the route,
which is the only place a response is written.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from sqlalchemy.orm import Session

from secure_feedback.core.errors import StoreError
from secure_feedback.modules.sanitization import sanitize_form
from secure_feedback.modules.validation import validate_form
from secure_feedback.schemas.feedback import FeedbackForm
from secure_feedback.services.feedback_service import FeedbackService

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Comment saved securely"
SERVER_ERROR_MESSAGE = "Server error"


class SubmissionState(str, Enum):
    """Terminal states of a submission"""
    PERSISTED = "persisted"
    REJECTED = "rejected"
    STORE_FAILED = "store_failed"


@dataclass(frozen=True)
class SubmissionOutcome:
    state: SubmissionState
    status_code: int
    message: str


def handle_submission(form: FeedbackForm, db: Session) -> SubmissionOutcome:
    """
    Validate, sanitize and persist one feedback form.

    :param form: Raw form input
    :param db: Database session for this request
    :return: Terminal state with the HTTP status and message to send
    """
    error = validate_form(form)
    if error is not None:
        logger.info(f"Feedback rejected: {error.kind.value}")
        return SubmissionOutcome(SubmissionState.REJECTED, 400, error.message)

    submission = sanitize_form(form)

    try:
        FeedbackService.save_feedback(db, submission)
    except StoreError as e:
        logger.error(f"Error storing feedback: {e}", exc_info=True)
        return SubmissionOutcome(SubmissionState.STORE_FAILED, 500, SERVER_ERROR_MESSAGE)

    return SubmissionOutcome(SubmissionState.PERSISTED, 200, SUCCESS_MESSAGE)
