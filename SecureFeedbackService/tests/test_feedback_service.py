import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from secure_feedback.core.errors import StoreError
from secure_feedback.schemas.feedback import FeedbackSubmission
from secure_feedback.services.feedback_service import FeedbackService
from tests.conftest import count_rows, fetch_rows


def make_submission(**overrides) -> FeedbackSubmission:
    values = {
        "nombres": "Ana",
        "apellidos": "Lopez",
        "email": "ana@test.com",
        "edad": 30,
        "direccion": "Calle 1",
        "comentario": "Muy bueno",
    }
    values.update(overrides)
    return FeedbackSubmission(**values)


def test_save_feedback_inserts_one_row(engine):
    with Session(engine) as db:
        FeedbackService.save_feedback(db, make_submission())

    assert fetch_rows(engine) == [{
        "nombres": "Ana",
        "apellidos": "Lopez",
        "email": "ana@test.com",
        "edad": 30,
        "direccion": "Calle 1",
        "comentario": "Muy bueno",
    }]


def test_comment_at_column_limit_is_stored(engine):
    with Session(engine) as db:
        FeedbackService.save_feedback(db, make_submission(comentario="a" * 300))
    assert count_rows(engine) == 1


def test_value_over_column_limit_raises_store_error(engine):
    with Session(engine) as db:
        with pytest.raises(StoreError, match="Comentario"):
            FeedbackService.save_feedback(db, make_submission(comentario="a" * 301))
    assert count_rows(engine) == 0


def test_missing_table_raises_store_error():
    engine = create_engine("sqlite://")
    with Session(engine) as db:
        with pytest.raises(StoreError) as exc_info:
            FeedbackService.save_feedback(db, make_submission())
    assert exc_info.value.__cause__ is not None
