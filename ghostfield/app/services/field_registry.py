"""
Field registry - owns every declared field of one form build.
Primary storage is keyed by logical name; a secondary index maps current-bucket
wire ids back to fields. Ids for other buckets are derived on demand.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from ghostfield.app.core.config import DEFAULT_FIELDS
from ghostfield.app.core.exceptions import InvalidFieldName
from ghostfield.app.schemas.field import Field, FieldSpec, validate_field_name
from ghostfield.app.utils.obfuscation import candidate_buckets, derive_wire_id, time_bucket

logger = logging.getLogger(__name__)


class FieldRegistry:
    """
    Request-scoped field store. `now` is captured once and never re-read;
    never share one instance between requests.
    """

    def __init__(self, secret_key: str, now: datetime | None = None):
        if not secret_key:
            logger.warning("Empty secret key: wire ids are predictable")
        self._key = secret_key
        self.now = now or datetime.now()
        self.bucket = time_bucket(self.now)
        self.buckets = candidate_buckets(self.now)
        self._fields: dict[str, Field] = {}
        self._by_wire_id: dict[str, Field] = {}

    def wire_id(self, name: str, bucket: str | None = None) -> str:
        """Wire id of a logical name for the given bucket (default: current)."""
        return derive_wire_id(name, self._key, bucket or self.bucket)

    def create_field(
        self,
        legit: bool,
        name: str,
        type: str = "",
        placeholder: str = "",
        *,
        value: str = "",
        sigil: bool = False,
    ) -> Field | None:
        """Build and store a field. Returns None when the name is invalid or held by the sigil."""
        try:
            validate_field_name(name)
        except InvalidFieldName as e:
            logger.debug("Field not created: %s", e)
            return None
        previous = self._fields.get(name)
        if previous is not None and previous.sigil and not sigil:
            # Sigil inputs belong to the handshake
            logger.warning("Field not created: %r is reserved by the sigil", name)
            return None
        field = Field(
            id=self.wire_id(name),
            name=name,
            type=type,
            placeholder=placeholder,
            value=value,
            legit=legit and not sigil,
            sigil=sigil,
        )
        if previous is not None:
            self._by_wire_id.pop(previous.id, None)
        self._fields[name] = field
        self._by_wire_id[field.id] = field
        return field

    def create_fields(self, specs: Iterable[Any] = DEFAULT_FIELDS) -> "FieldRegistry":
        """Bulk create. Defaults to the built-in honeypot catalog."""
        for entry in specs:
            spec = FieldSpec.coerce(entry)
            self.create_field(spec.legit, spec.name, spec.type, spec.placeholder)
        return self

    def add_legit(self, name: str, type: str = "", placeholder: str = "") -> "FieldRegistry":
        self.create_field(True, name, type, placeholder)
        return self

    def add_honeypot(self, name: str, type: str = "", placeholder: str = "") -> "FieldRegistry":
        self.create_field(False, name, type, placeholder)
        return self

    def get_field(self, name: str) -> Field | None:
        return self._fields.get(name)

    def get_by_wire_id(self, wire_id: str) -> Field | None:
        return self._by_wire_id.get(wire_id)

    def get_id(self, name: str) -> str:
        """Current wire id of a logical name, or '' if unknown."""
        field = self._fields.get(name)
        return field.id if field else ""

    @property
    def fields(self) -> list[Field]:
        """All fields in insertion order."""
        return list(self._fields.values())

    def all_fields(self) -> list[Field]:
        return self.fields

    def legit_fields(self) -> list[Field]:
        return [f for f in self._fields.values() if f.legit]

    def trap_fields(self) -> list[Field]:
        """Honeypots and sigil fields."""
        return [f for f in self._fields.values() if not f.legit]

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def _extract_for_bucket(self, submitted: Mapping[str, str], bucket: str) -> dict[str, str]:
        data: dict[str, str] = {}
        for field in self.legit_fields():
            wire_id = self.wire_id(field.name, bucket)
            if wire_id in submitted:
                data[field.name] = submitted[wire_id]
        return data

    def extract_data(self, submitted: Mapping[str, str]) -> dict[str, str]:
        """
        Legit values keyed by logical name.
        Tries the current bucket for every field; only if nothing matched,
        retries the previous bucket for every field. Buckets are never mixed.
        """
        for bucket in self.buckets:
            data = self._extract_for_bucket(submitted, bucket)
            if data:
                if bucket != self.bucket:
                    logger.debug("Extracted %d fields from previous bucket %s", len(data), bucket)
                return data
        return {}
