"""
Normalization and HTML escaping of validated form input.
"""
from secure_feedback.modules.validation import parse_age
from secure_feedback.schemas.feedback import FeedbackForm, FeedbackSubmission

# Only tag delimiters are escaped; quotes and ampersands are plain text
_MARKUP_ESCAPES = str.maketrans({"<": "&lt;", ">": "&gt;"})


def sanitize_text(value: str) -> str:
    """
    Escape tag delimiters so any markup is rendered inert.

    Text without ``<`` or ``>`` passes through unchanged, and escaping an
    already sanitized value changes nothing.
    """
    return value.translate(_MARKUP_ESCAPES)


def sanitize_form(form: FeedbackForm) -> FeedbackSubmission:
    """
    Build the storable submission from a form that passed validation.

    Every field is trimmed, the email is lower-cased, text fields are
    HTML-escaped and the age is coerced to an integer.

    :param form: Validated raw form
    :return: Immutable sanitized submission
    """
    return FeedbackSubmission(
        nombres=sanitize_text(form.nombres.strip()),
        apellidos=sanitize_text(form.apellidos.strip()),
        email=sanitize_text(form.email.strip().lower()),
        edad=parse_age(form.edad.strip()),
        direccion=sanitize_text(form.direccion.strip()),
        comentario=sanitize_text(form.comentario.strip()),
    )
