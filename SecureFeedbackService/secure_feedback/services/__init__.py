"""
Services package - Business logic layer
"""
from secure_feedback.services.feedback_service import FeedbackService

__all__ = [
    "FeedbackService"
]
