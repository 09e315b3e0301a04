"""
Feedback persistence service
"""
import logging

from sqlalchemy import String
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from secure_feedback.core.errors import StoreError
from secure_feedback.models.secure_feedback import secure_feedback_table
from secure_feedback.schemas.feedback import FeedbackSubmission

logger = logging.getLogger(__name__)


class FeedbackService:
    """Service for writing feedback rows to the store"""

    @staticmethod
    def check_column_bounds(values: dict) -> None:
        """
        Refuse text values longer than their column allows

        Raises:
            StoreError: If a value exceeds its column length
        """
        for column in secure_feedback_table.columns:
            if not isinstance(column.type, String) or column.type.length is None:
                continue
            value = values[column.key]
            if len(value) > column.type.length:
                raise StoreError(
                    f"Value for column {column.name} is {len(value)} characters, "
                    f"limit is {column.type.length}"
                )

    @staticmethod
    def save_feedback(db: Session, submission: FeedbackSubmission) -> None:
        """
        Insert one feedback row with a single parameterized statement

        Args:
            db: Database session
            submission: Sanitized submission

        Raises:
            StoreError: If the insert fails (the transaction is rolled back)
        """
        values = submission.model_dump()
        FeedbackService.check_column_bounds(values)
        try:
            db.execute(secure_feedback_table.insert(), values)
            db.commit()
            logger.info("Stored feedback row")
        except SQLAlchemyError as e:
            db.rollback()
            raise StoreError(f"Feedback insert failed: {str(e)}") from e
