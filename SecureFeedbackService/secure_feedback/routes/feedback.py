"""
Feedback form routes
"""
from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.orm import Session

from secure_feedback.core.database import get_db
from secure_feedback.pipelines.submission import handle_submission
from secure_feedback.schemas.feedback import FeedbackForm

router = APIRouter(tags=["feedback"])

FORM_HTML = """<!DOCTYPE html>
<html lang="es">
<head><meta charset="utf-8"><title>Comentarios</title></head>
<body>
    <h1>Comentarios</h1>
    <form method="POST" action="/comentario">
        <input type="text" name="nombres" placeholder="Nombres" required><br><br>
        <input type="text" name="apellidos" placeholder="Apellidos" required><br><br>
        <input type="email" name="email" placeholder="Email" required><br><br>
        <input type="number" name="edad" placeholder="Edad" required><br><br>
        <input type="text" name="direccion" placeholder="Dirección" required><br><br>
        <textarea name="comentario" placeholder="Escribe tu comentario" required></textarea><br><br>
        <button type="submit">Enviar</button>
    </form>
</body>
</html>
"""


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Render the feedback form"
)
def render_form():
    """Static HTML form, no validation happens here"""
    return HTMLResponse(content=FORM_HTML)


@router.post(
    "/comentario",
    response_class=PlainTextResponse,
    summary="Submit feedback",
    description="""
    Validate, sanitize and store one feedback form.

    Missing fields are accepted by the route itself and rejected by the
    validation chain with a plain-text 400.
    """
)
def submit_feedback(
    nombres: Optional[str] = Form(None, description="First name"),
    apellidos: Optional[str] = Form(None, description="Last name"),
    email: Optional[str] = Form(None, description="Email address"),
    edad: Optional[str] = Form(None, description="Age, 1-120"),
    direccion: Optional[str] = Form(None, description="Address"),
    comentario: Optional[str] = Form(None, description="Comment"),
    db: Session = Depends(get_db)
):
    """
    Submit feedback

    - **200**: row stored
    - **400**: validation failed
    - **500**: store failure (details are only logged)
    """
    form = FeedbackForm(
        nombres=nombres,
        apellidos=apellidos,
        email=email,
        edad=edad,
        direccion=direccion,
        comentario=comentario
    )
    outcome = handle_submission(form, db)
    return PlainTextResponse(content=outcome.message, status_code=outcome.status_code)
