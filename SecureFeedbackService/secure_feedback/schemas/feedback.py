"""
Pydantic schemas for feedback submissions
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

FORM_FIELDS = ("nombres", "apellidos", "email", "edad", "direccion", "comentario")


class FeedbackForm(BaseModel):
    """Raw form input, exactly as received (every field may be missing)"""
    nombres: Optional[str] = None
    apellidos: Optional[str] = None
    email: Optional[str] = None
    edad: Optional[str] = None
    direccion: Optional[str] = None
    comentario: Optional[str] = None


class FeedbackSubmission(BaseModel):
    """Validated, trimmed and HTML-escaped submission ready to be stored"""
    model_config = ConfigDict(frozen=True)

    nombres: str = Field(..., min_length=1, description="First name")
    apellidos: str = Field(..., min_length=1, description="Last name")
    email: str = Field(..., min_length=1, description="Lower-cased email")
    edad: int = Field(..., ge=1, le=120, description="Age in years")
    direccion: str = Field(..., min_length=1, description="Address")
    comentario: str = Field(..., min_length=1, description="Comment")
