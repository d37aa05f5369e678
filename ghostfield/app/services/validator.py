"""
Submission validator - single pass over the tolerated time buckets.

For each bucket (current first, then previous if distinct) every non-legit
field is looked up under that bucket's wire id:
- sigil fields: captured once, never subject to the fill-in rule
- honeypots: any submitted value other than "" rejects immediately

Then, if the sigil is enabled, the captured proof must verify.
"""
from __future__ import annotations

import enum
import logging
from collections.abc import Mapping

from pydantic import BaseModel

from ghostfield.app.services.field_registry import FieldRegistry
from ghostfield.app.services.sigil import SigilProtocol

logger = logging.getLogger(__name__)


class RejectionReason(str, enum.Enum):
    HONEYPOT_FILLED = "honeypot_filled"
    SIGIL_MISSING = "sigil_missing"
    SIGIL_MISMATCH = "sigil_mismatch"


class ValidationResult(BaseModel):
    accepted: bool
    reason: RejectionReason | None = None
    field: str | None = None  # logical name of the tripped honeypot
    bucket: str | None = None

    def __bool__(self) -> bool:
        return self.accepted


ACCEPTED = ValidationResult(accepted=True)


def _is_filled(value: object) -> bool:
    # Whitespace counts as filled; only a missing or empty value is tolerated.
    return value is not None and value != ""


class Validator:
    def __init__(self, registry: FieldRegistry, sigil: SigilProtocol | None = None):
        self.registry = registry
        self.sigil = sigil

    def run(self, submitted: Mapping[str, str], user_agent: str = "") -> ValidationResult:
        sigil_enabled = self.sigil is not None and self.sigil.enabled
        sigil_time = ""
        sigil_proof = ""

        for bucket in self.registry.buckets:
            for field in self.registry.trap_fields():
                wire_id = self.registry.wire_id(field.name, bucket)
                value = submitted.get(wire_id)
                if field.sigil:
                    if not sigil_enabled:
                        continue
                    if field.name == self.sigil.time_name and not sigil_time:
                        sigil_time = value or ""
                    elif field.name == self.sigil.name and not sigil_proof:
                        sigil_proof = value or ""
                    continue
                if _is_filled(value):
                    logger.info("Submission rejected: honeypot %s filled (bucket %s)", field.name, bucket)
                    return ValidationResult(
                        accepted=False,
                        reason=RejectionReason.HONEYPOT_FILLED,
                        field=field.name,
                        bucket=bucket,
                    )

        if sigil_enabled:
            if not sigil_time or not sigil_proof:
                logger.info("Submission rejected: sigil values missing")
                return ValidationResult(accepted=False, reason=RejectionReason.SIGIL_MISSING)
            if not self.sigil.verify(sigil_time, sigil_proof, user_agent):
                logger.info("Submission rejected: sigil proof mismatch")
                return ValidationResult(accepted=False, reason=RejectionReason.SIGIL_MISMATCH)

        return ACCEPTED

    def validate(self, submitted: Mapping[str, str], user_agent: str = "") -> bool:
        return self.run(submitted, user_agent).accepted
