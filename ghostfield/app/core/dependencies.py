"""
Dependency injection utilities
"""
from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import Depends

from ghostfield.app.core.config import CONTACT_FORM_FIELDS, settings
from ghostfield.app.services.ghost_field import GhostField


def get_now() -> datetime:
    """Request time; the single clock read for a request's GhostField."""
    if settings.timezone:
        return datetime.now(ZoneInfo(settings.timezone))
    return datetime.now()


def get_ghost_field(now: datetime = Depends(get_now)) -> GhostField:
    """Fresh GhostField for the contact form. One per request, never shared."""
    gf = GhostField(settings.secret_key, now)
    gf.create_fields(CONTACT_FORM_FIELDS)
    if settings.seed_default_honeypots:
        gf.create_fields()
    if settings.sigil_enabled:
        gf.enable_sigil(settings.sigil_name)
    return gf
