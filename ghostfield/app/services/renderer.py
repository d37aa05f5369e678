"""
Markup for GhostField forms - honeypot inputs and the hide/handshake script.
Pure string building; the registry decides what exists, this only prints it.
"""
from __future__ import annotations

import html

from ghostfield.app.core.config import SIGIL_PROOF_PREFIX
from ghostfield.app.schemas.field import Field
from ghostfield.app.services.field_registry import FieldRegistry
from ghostfield.app.services.sigil import SigilProtocol

_TRAP_TEMPLATE = (
    '<label id="{id}">\n'
    "    {name}\n"
    '    <input type="{type}" name="{id}" title="{placeholder}" placeholder="{placeholder}" '
    'value="{value}" autocomplete="off" required tabindex="-1" />\n'
    "</label>"
)
_HIDDEN_TEMPLATE = '<input type="hidden" name="{id}" value="{value}" />'
_LEGIT_TEMPLATE = (
    '<label for="{id}">{label}</label>\n'
    '<input type="{type}" id="{id}" name="{id}" placeholder="{placeholder}" value="{value}" />'
)

# Must stay byte-compatible with utils.integrity.hash32
_SCRIPT_HEAD = """(function() {
    function fnv1a32(str) {
        let hash = 0x811c9dc5;
        const bytes = (new TextEncoder()).encode(str);
        for (let i = 0; i < bytes.length; i++) {
            hash ^= bytes[i];
            hash = Math.imul(hash, 0x01000193);
        }
        return (hash >>> 0).toString(16).padStart(8, '0');
    }
    let label = null;
    let input = null;
    const style = document.createElement('style');
    style.type = 'text/css';
"""
_SCRIPT_HIDE = """    style.innerHTML += `#{id} {{
        pointer-events: none;
        position: absolute;
        display: block;
        opacity: 0;
        left: -9999px;
        max-width: 0;
        width: 0;
        height: 0;
        max-height: 0;
    }}`;
    label = document.getElementById('{id}');
    input = label ? label.querySelector('input') : null;
    if (input) {{
        input.required = false;
        input.removeAttribute('required');
    }}
"""
_SCRIPT_SIGIL = """    const T = document.querySelector('input[name="{time_id}"]');
    input = document.querySelector('input[name="{id}"]');
    if (T && input) {{
        input.value = '{prefix}' + fnv1a32(navigator.userAgent + T.value);
    }}
"""
_SCRIPT_TAIL = """    document.head.appendChild(style);
})();"""


def _attrs(field: Field) -> dict[str, str]:
    return {
        "id": html.escape(field.id),
        "name": html.escape(field.name),
        "type": html.escape(field.type),
        "placeholder": html.escape(field.placeholder),
        "value": html.escape(field.value),
    }


class HoneypotRenderer:
    def __init__(self, registry: FieldRegistry, sigil: SigilProtocol | None = None):
        self.registry = registry
        self.sigil = sigil

    def render_trap(self, field: Field) -> str:
        template = _HIDDEN_TEMPLATE if field.is_hidden else _TRAP_TEMPLATE
        return template.format(**_attrs(field))

    def render_honeypots(self) -> str:
        """Every honeypot and sigil input, in declaration order."""
        return "\n".join(self.render_trap(f) for f in self.registry.trap_fields())

    def render_field(self, field: Field, label: str | None = None) -> str:
        """Visible input for a legit field."""
        return _LEGIT_TEMPLATE.format(label=html.escape(label or field.name), **_attrs(field))

    def render_legit_fields(self) -> str:
        return "\n".join(self.render_field(f) for f in self.registry.legit_fields())

    def render_hide_script(self) -> str:
        """
        JS that hides trap labels, drops their `required` flag and, with the
        sigil enabled, writes the handshake proof before submission.
        """
        parts = [_SCRIPT_HEAD]
        for field in self.registry.trap_fields():
            parts.append(_SCRIPT_HIDE.format(id=field.id))
        if self.sigil is not None and self.sigil.enabled:
            parts.append(
                _SCRIPT_SIGIL.format(
                    time_id=self.registry.get_id(self.sigil.time_name),
                    id=self.registry.get_id(self.sigil.name),
                    prefix=SIGIL_PROOF_PREFIX,
                )
            )
        parts.append(_SCRIPT_TAIL)
        return "".join(parts)
