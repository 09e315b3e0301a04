"""
Database models for the feedback store
"""
from secure_feedback.models.secure_feedback import secure_feedback_table

__all__ = [
    "secure_feedback_table",
]
