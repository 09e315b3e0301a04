"""
Shared fixtures: an in-memory SQLite store behind the real application
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, select
from sqlalchemy.pool import StaticPool

from secure_feedback.application import create_app
from secure_feedback.core.config import Settings
from secure_feedback.core.database import Base
from secure_feedback.models import secure_feedback_table


@pytest.fixture
def settings():
    return Settings(
        DB_SERVER="feedback-db.example.com",
        DB_NAME="feedback",
        DB_USER="feedback_writer",
        DB_PASS="s3cret-pass",
        _env_file=None,
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(settings, engine):
    app = create_app(settings, engine=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_form():
    return {
        "nombres": "Ana",
        "apellidos": "Lopez",
        "email": "ana@test.com",
        "edad": "30",
        "direccion": "Calle 1",
        "comentario": "Muy bueno",
    }


def count_rows(engine) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(secure_feedback_table)).scalar_one()


def fetch_rows(engine) -> list:
    with engine.connect() as conn:
        rows = conn.execute(select(secure_feedback_table)).all()
    return [
        {column.key: row._mapping[column] for column in secure_feedback_table.columns}
        for row in rows
    ]
