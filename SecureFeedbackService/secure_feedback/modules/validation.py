"""
Validation chain for feedback form input.

Each validator inspects the raw form and returns ``None`` when the check
passes or a ``ValidationError`` describing the first problem it found.
``validate_form`` runs them in order and stops at the first failure.
"""
import re
import logging
from typing import Callable, Optional, Sequence

from email_validator import EmailNotValidError, validate_email

from secure_feedback.core.errors import ValidationError, ValidationErrorKind
from secure_feedback.schemas.feedback import FORM_FIELDS, FeedbackForm

logger = logging.getLogger(__name__)

MIN_AGE = 1
MAX_AGE = 120
SCRIPT_MARKER = "<script"

# Optional sign, any leading zeroes, then at most three significant digits
_AGE_RE = re.compile(r"(?P<sign>[-+]?)0*(?P<digits>[0-9]{1,3})")

Validator = Callable[[FeedbackForm], Optional[ValidationError]]


def parse_age(text: str) -> Optional[int]:
    """
    Parse an integer age literal.

    Leading zeroes are dropped before conversion, so only up to three
    digits are ever handed to ``int``.

    :param text: Raw age text, e.g. "30", "+030"
    :return: The integer value, or None when the text is not a short integer
    """
    match = _AGE_RE.fullmatch(text)
    if match is None:
        return None
    return int(match.group("sign") + match.group("digits"))


def check_required_fields(form: FeedbackForm) -> Optional[ValidationError]:
    for name in FORM_FIELDS:
        value = getattr(form, name)
        if not value or not value.strip():
            return ValidationError(ValidationErrorKind.MISSING_FIELD)
    return None


def check_email(form: FeedbackForm) -> Optional[ValidationError]:
    try:
        validate_email(form.email, check_deliverability=False)
    except EmailNotValidError as e:
        logger.debug(f"Rejected email: {e}")
        return ValidationError(ValidationErrorKind.BAD_EMAIL)
    return None


def check_age(form: FeedbackForm) -> Optional[ValidationError]:
    age = parse_age(form.edad)
    if age is None or not MIN_AGE <= age <= MAX_AGE:
        return ValidationError(ValidationErrorKind.BAD_AGE)
    return None


def check_injection_marker(form: FeedbackForm) -> Optional[ValidationError]:
    """Reject free text carrying a literal script tag opener (any case)."""
    combined = f"{form.nombres} {form.apellidos} {form.direccion} {form.comentario}".lower()
    if SCRIPT_MARKER in combined:
        return ValidationError(ValidationErrorKind.MALICIOUS_INPUT)
    return None


VALIDATORS: Sequence[Validator] = (
    check_required_fields,
    check_email,
    check_age,
    check_injection_marker,
)


def validate_form(
    form: FeedbackForm,
    validators: Sequence[Validator] = VALIDATORS,
) -> Optional[ValidationError]:
    """
    Run validators in order, short-circuiting on the first failure.

    :param form: Raw form input
    :param validators: Ordered validator functions
    :return: The first ValidationError, or None when every check passed
    """
    for validator in validators:
        error = validator(form)
        if error is not None:
            return error
    return None
