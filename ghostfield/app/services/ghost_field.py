"""
GhostField - honeypot fields, obfuscated field names and an optional JS handshake.

Typical request cycle:

    gf = GhostField(settings.secret_key).create_fields().add_legit("email", "email")
    gf.enable_sigil()
    html = gf.html_honeypots() + ...           # render, using gf.get_id("email")
    ...
    if gf.validate(form, user_agent):          # on submit
        data = gf.get_data(form)               # {"email": "..."}

Complements, never replaces, server-side validation or CAPTCHA.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from ghostfield.app.core.config import DEFAULT_FIELDS, DEFAULT_SIGIL_NAME
from ghostfield.app.core.exceptions import ValidationRejected
from ghostfield.app.schemas.field import Field
from ghostfield.app.services.field_registry import FieldRegistry
from ghostfield.app.services.renderer import HoneypotRenderer
from ghostfield.app.services.sigil import SigilProtocol
from ghostfield.app.services.validator import ValidationResult, Validator


class GhostField:
    def __init__(self, secret_key: str, now: datetime | None = None):
        self.registry = FieldRegistry(secret_key, now)
        self.sigil = SigilProtocol(self.registry)
        self.validator = Validator(self.registry, self.sigil)
        self.renderer = HoneypotRenderer(self.registry, self.sigil)

    @property
    def now(self) -> datetime:
        return self.registry.now

    # --- Declaration ---

    def create_field(self, legit: bool, name: str, type: str = "", placeholder: str = "") -> Field | None:
        return self.registry.create_field(legit, name, type, placeholder)

    def create_fields(self, specs: Iterable[Any] = DEFAULT_FIELDS) -> "GhostField":
        self.registry.create_fields(specs)
        return self

    def add_legit(self, name: str, type: str = "", placeholder: str = "") -> "GhostField":
        self.registry.add_legit(name, type, placeholder)
        return self

    def add_honeypot(self, name: str, type: str = "", placeholder: str = "") -> "GhostField":
        self.registry.add_honeypot(name, type, placeholder)
        return self

    def enable_sigil(self, name: str = DEFAULT_SIGIL_NAME) -> "GhostField":
        self.sigil.enable(name)
        return self

    # --- Lookup ---

    def get_fields(self) -> list[Field]:
        return self.registry.fields

    def get_field(self, name: str) -> Field | None:
        return self.registry.get_field(name)

    def get_id(self, name: str) -> str:
        return self.registry.get_id(name)

    # --- Rendering ---

    def html_honeypots(self) -> str:
        return self.renderer.render_honeypots()

    def hide_js(self) -> str:
        return self.renderer.render_hide_script()

    # --- Submission ---

    def get_data(self, submitted: Mapping[str, str]) -> dict[str, str]:
        return self.registry.extract_data(submitted)

    def check(self, submitted: Mapping[str, str], user_agent: str = "") -> ValidationResult:
        return self.validator.run(submitted, user_agent)

    def validate(self, submitted: Mapping[str, str], user_agent: str = "") -> bool:
        return self.check(submitted, user_agent).accepted

    def require_valid(self, submitted: Mapping[str, str], user_agent: str = "") -> dict[str, str]:
        """Validate and extract in one call; raises ValidationRejected on a bot verdict."""
        result = self.check(submitted, user_agent)
        if not result.accepted:
            raise ValidationRejected(result)
        return self.get_data(submitted)
