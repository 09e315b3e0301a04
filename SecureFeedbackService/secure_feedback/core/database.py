"""
Database engine, session factory and declarative base
"""
import ssl
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from secure_feedback.core.config import Settings

Base = declarative_base()


def build_database_url(settings: Settings) -> URL:
    """Build the MySQL connection URL from settings"""
    return URL.create(
        "mysql+pymysql",
        username=settings.DB_USER,
        password=settings.DB_PASS,
        host=settings.DB_SERVER,
        port=settings.DB_PORT,
        database=settings.DB_NAME,
        query={"charset": "utf8mb4"},
    )


def build_connect_args(settings: Settings) -> dict:
    """
    TLS options for the pymysql driver.

    Encryption is always on and the server certificate and host name are
    always verified, against ``DB_SSL_CA`` when set or the system CAs
    otherwise. pymysql takes the ready-made context as-is.
    """
    return {"ssl": ssl.create_default_context(cafile=settings.DB_SSL_CA)}


def create_store_engine(settings: Settings) -> Engine:
    """
    Create the engine for the feedback store

    Args:
        settings: Application settings

    Returns:
        SQLAlchemy engine (no connection is opened yet)
    """
    return create_engine(
        build_database_url(settings),
        connect_args=build_connect_args(settings),
        pool_pre_ping=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to the store engine, one session per request"""
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency yielding one session per request"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
