"""
Database table for SecureFeedback
"""
from sqlalchemy import Column, Integer, String, Table

from secure_feedback.core.database import Base

# Rows are insert-only, so the table is mapped with Core rather than the ORM.
secure_feedback_table = Table(
    "SecureFeedback",
    Base.metadata,
    Column("Nombres", String(100), key="nombres", nullable=False),
    Column("Apellidos", String(100), key="apellidos", nullable=False),
    Column("Email", String(150), key="email", nullable=False),
    Column("Edad", Integer, key="edad", nullable=False),
    Column("Direccion", String(200), key="direccion", nullable=False),
    Column("Comentario", String(300), key="comentario", nullable=False),
)
