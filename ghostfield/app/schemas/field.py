"""
Field Pydantic schemas - one logical form input and its declaration spec
"""
from __future__ import annotations

import re
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as PydanticField

from ghostfield.app.core.config import DEFAULT_INPUT_TYPE, FIELD_NAME_PATTERN
from ghostfield.app.core.exceptions import InvalidFieldName

_NAME_RE = re.compile(FIELD_NAME_PATTERN)


def validate_field_name(name: str) -> str:
    """Return name unchanged, or raise InvalidFieldName."""
    if not isinstance(name, str) or not _NAME_RE.fullmatch(name):
        raise InvalidFieldName(name)
    return name


class Field(BaseModel):
    """
    One form input, frozen once built.

    - **id**: obfuscated wire name (derived by the registry)
    - **name**: logical name
    - **legit**: real data field; False means honeypot
    - **sigil**: part of the JS handshake (always a non-legit field)
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = PydanticField(pattern=FIELD_NAME_PATTERN)
    type: str = DEFAULT_INPUT_TYPE
    placeholder: str = ""
    value: str = ""
    legit: bool = False
    sigil: bool = False

    @field_validator("type", mode="before")
    @classmethod
    def _default_type(cls, v: Any) -> str:
        return v or DEFAULT_INPUT_TYPE

    @property
    def is_hidden(self) -> bool:
        return self.type == "hidden"


class FieldSpec(BaseModel):
    """Declaration used by bulk creation."""

    legit: bool = True
    name: str
    type: str = ""
    placeholder: str = ""

    @classmethod
    def coerce(cls, entry: Union["FieldSpec", str, tuple, list]) -> "FieldSpec":
        """
        Accept the loose shapes bulk callers use:
        (legit, name, type?, placeholder?), (name, type?, placeholder?) or a bare name.
        Entries without a leading bool are legit.
        """
        if isinstance(entry, FieldSpec):
            return entry
        if isinstance(entry, str):
            return cls(name=entry)
        items = list(entry)
        legit = True
        if items and isinstance(items[0], bool):
            legit = items.pop(0)
        name, type_, placeholder = (items + ["", "", ""])[:3]
        return cls(legit=legit, name=name or "", type=type_ or "", placeholder=placeholder or "")
