"""
Form API routes - serve the protected contact form and validate submissions.
A fresh GhostField is built per request; its clock read is the request time.
"""
from __future__ import annotations

import html
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from ghostfield.app.core.config import settings
from ghostfield.app.core.dependencies import get_ghost_field
from ghostfield.app.core.exceptions import ValidationRejected
from ghostfield.app.core.logging_config import get_logger
from ghostfield.app.services.ghost_field import GhostField

logger = get_logger("api.forms")
router = APIRouter(prefix="/forms", tags=["forms"])

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{title}</title></head>
<body>
<form method="post" action="{action}">
{legit}
{traps}
<button type="submit">Send</button>
</form>
<script>
{script}
</script>
</body>
</html>"""


# --- Schemas ---
class FieldOut(BaseModel):
    id: str
    name: str
    type: str
    placeholder: str
    value: str
    legit: bool
    sigil: bool


class FormSchemaOut(BaseModel):
    fields: list[FieldOut]
    sigil: str | None = None
    bucket: str


class SubmissionOut(BaseModel):
    accepted: bool
    data: dict[str, str]


@router.get("/contact", response_class=HTMLResponse)
def contact_form(request: Request, gf: GhostField = Depends(get_ghost_field)):
    """Render the contact form with honeypots and the hide/handshake script."""
    page = _PAGE_TEMPLATE.format(
        title=html.escape(settings.app_name),
        action=html.escape(str(request.url.path)),
        legit=gf.renderer.render_legit_fields(),
        traps=gf.html_honeypots(),
        script=gf.hide_js(),
    )
    return HTMLResponse(page)


@router.get("/contact/schema", response_model=FormSchemaOut)
def contact_form_schema(gf: GhostField = Depends(get_ghost_field)):
    """Field descriptors for clients that render the form themselves."""
    return FormSchemaOut(
        fields=[FieldOut(**f.model_dump()) for f in gf.get_fields()],
        sigil=gf.sigil.name or None,
        bucket=gf.registry.bucket,
    )


@router.post("/contact", response_model=SubmissionOut)
async def submit_contact_form(request: Request, gf: GhostField = Depends(get_ghost_field)):
    """
    Validate a form-encoded submission.

    - **200**: accepted, legit values keyed by logical name
    - **403**: honeypot filled or sigil proof missing/wrong
    """
    form = await request.form()
    submitted: dict[str, Any] = {k: v for k, v in form.items() if isinstance(v, str)}
    user_agent = request.headers.get("user-agent", "")
    try:
        data = gf.require_valid(submitted, user_agent)
    except ValidationRejected as e:
        logger.info(
            "Contact form rejected reason=%s field=%s client=%s",
            e.result.reason.value if e.result.reason else None,
            e.result.field,
            request.client.host if request.client else "-",
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return SubmissionOut(accepted=True, data=data)
