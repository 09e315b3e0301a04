"""
Error types for the feedback pipeline
"""
from dataclasses import dataclass
from enum import Enum


class ValidationErrorKind(str, Enum):
    """Client-caused rejection reasons"""
    MISSING_FIELD = "missing field"
    BAD_EMAIL = "bad email"
    BAD_AGE = "bad age"
    MALICIOUS_INPUT = "malicious input"


VALIDATION_MESSAGES = {
    ValidationErrorKind.MISSING_FIELD: "All fields are required",
    ValidationErrorKind.BAD_EMAIL: "Invalid email",
    ValidationErrorKind.BAD_AGE: "Invalid age",
    ValidationErrorKind.MALICIOUS_INPUT: "Input rejected for containing malicious code",
}


@dataclass(frozen=True)
class ValidationError:
    """Result value returned by a failing validator (never raised)"""
    kind: ValidationErrorKind

    @property
    def message(self) -> str:
        return VALIDATION_MESSAGES[self.kind]


class StoreError(Exception):
    """Feedback store operation exception"""
    pass
