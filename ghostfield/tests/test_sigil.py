"""Tests for the sigil JS handshake fields and proof contract."""
import re

import pytest

from ghostfield.app.services.field_registry import FieldRegistry
from ghostfield.app.services.ghost_field import GhostField
from ghostfield.app.services.sigil import SigilProtocol, expected_proof

from conftest import FIREFOX_UA, SECRET

# sha1("1741964966"), the unix time of FIXED_NOW
FIXED_TIME_TOKEN = "52ddd4d7e97c1680e2f27bf4095471f639565b74"


def _sigil(now):
    registry = FieldRegistry(SECRET, now)
    return registry, SigilProtocol(registry)


def test_enable_creates_two_hidden_sigil_fields(now):
    registry, sigil = _sigil(now)
    sigil.enable()
    assert [f.name for f in registry.fields] == ["sigil_time", "sigil"]
    for field in registry.fields:
        assert field.sigil is True
        assert field.legit is False
        assert field.type == "hidden"
    assert sigil.enabled
    assert sigil.time_name == "sigil_time"


def test_time_field_is_sha1_of_epoch(now):
    registry, sigil = _sigil(now)
    sigil.enable()
    assert registry.get_field("sigil_time").value == FIXED_TIME_TOKEN
    assert sigil.time_value == FIXED_TIME_TOKEN


def test_placeholder_token_never_looks_like_a_proof(now):
    registry, sigil = _sigil(now)
    sigil.enable()
    token = registry.get_field("sigil").value
    assert token.startswith("tck_")
    assert not re.fullmatch(r"tck_[0-9a-f]{8}", token)
    assert not sigil.verify(FIXED_TIME_TOKEN, token, FIREFOX_UA)


def test_enable_is_idempotent(now):
    registry, sigil = _sigil(now)
    sigil.enable()
    sigil.enable()
    sigil.enable("other")
    assert len(registry) == 2
    assert sigil.name == "sigil"


def test_enable_custom_name(now):
    registry, sigil = _sigil(now)
    sigil.enable("js_check")
    assert "js_check_time" in registry
    assert "js_check" in registry


@pytest.mark.parametrize("name", ["bad name", "", "sigil!"])
def test_enable_with_invalid_name_stays_disabled(now, name):
    registry, sigil = _sigil(now)
    sigil.enable(name)
    assert not sigil.enabled
    assert len(registry) == 0


def test_expected_proof_pinned():
    assert expected_proof(FIREFOX_UA, FIXED_TIME_TOKEN) == "tck_c24facf4"


def test_verify(now):
    _, sigil = _sigil(now)
    assert sigil.verify(FIXED_TIME_TOKEN, "tck_c24facf4", FIREFOX_UA)
    assert not sigil.verify(FIXED_TIME_TOKEN, "tck_c24facf4", FIREFOX_UA + " extra")
    assert not sigil.verify(FIXED_TIME_TOKEN, "TCK_c24facf4", FIREFOX_UA)
    assert not sigil.verify("", "tck_c24facf4", FIREFOX_UA)
    assert not sigil.verify(FIXED_TIME_TOKEN, None, FIREFOX_UA)


def test_enable_with_empty_name_renders_nothing(now):
    gf = GhostField(SECRET, now).enable_sigil("")
    assert gf.get_fields() == []
    assert gf.html_honeypots() == ""


def test_sigil_fields_cannot_be_redeclared(now):
    registry, sigil = _sigil(now)
    sigil.enable()
    assert registry.create_field(False, "sigil") is None
    assert registry.create_field(True, "sigil_time", "text") is None
    registry.add_honeypot("sigil")
    assert all(f.sigil for f in registry.fields)
    assert len(registry) == 2
