"""
Sigil - optional JavaScript handshake.

Two hidden non-legit fields are added to the form:
- "<name>_time": sha1 of the registry's unix timestamp (T)
- "<name>": an opaque placeholder the browser overwrites with
  "tck_" + fnv1a32(navigator.userAgent + T)

The server recomputes the proof from the submitted T and the request's
User-Agent header. Any UA rewriting between browser and server breaks it.
"""
from __future__ import annotations

import hashlib
import logging
import uuid

from ghostfield.app.core.config import (
    DEFAULT_SIGIL_NAME,
    SIGIL_PROOF_PREFIX,
    SIGIL_TIME_SUFFIX,
)
from ghostfield.app.core.exceptions import InvalidFieldName
from ghostfield.app.schemas.field import validate_field_name
from ghostfield.app.services.field_registry import FieldRegistry
from ghostfield.app.utils.integrity import hash32

logger = logging.getLogger(__name__)


def expected_proof(user_agent: str, time_value: str) -> str:
    return SIGIL_PROOF_PREFIX + hash32(user_agent + time_value)


class SigilProtocol:
    def __init__(self, registry: FieldRegistry):
        self.registry = registry
        self.name = ""
        self.time_value = ""

    @property
    def enabled(self) -> bool:
        return bool(self.name)

    @property
    def time_name(self) -> str:
        return self.name + SIGIL_TIME_SUFFIX if self.name else ""

    def enable(self, name: str = DEFAULT_SIGIL_NAME) -> "SigilProtocol":
        """Add the two sigil fields. A second call is a no-op."""
        if self.name:
            return self
        try:
            validate_field_name(name)
        except InvalidFieldName as e:
            logger.warning("Sigil not enabled: %s", e)
            return self
        time_field = self.registry.create_field(
            False,
            name + SIGIL_TIME_SUFFIX,
            "hidden",
            value=self._timestamp_token(),
            sigil=True,
        )
        self.registry.create_field(
            False,
            name,
            "hidden",
            value=SIGIL_PROOF_PREFIX + uuid.uuid4().hex[:13],
            sigil=True,
        )
        self.name = name
        self.time_value = time_field.value
        return self

    def _timestamp_token(self) -> str:
        epoch = int(self.registry.now.timestamp())
        return hashlib.sha1(str(epoch).encode("utf-8")).hexdigest()

    def verify(self, time_value: str | None, proof_value: str | None, user_agent: str) -> bool:
        """Exact match of the submitted proof against the recomputed one."""
        if not time_value or not proof_value:
            return False
        return expected_proof(user_agent or "", time_value) == proof_value
