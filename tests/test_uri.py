"""Tests for otpauth:// provisioning URIs."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qsl, unquote, urlsplit

from totpcore import TotpEngine


@dataclass
class User:
    identifier: str


def test_uri_with_identifier():
    uri = TotpEngine("ABCD1234").get_uri("App", identifier="alice")
    assert uri == "otpauth://totp/App:alice?secret=ABCD1234&algorithm=sha1&digits=6&period=30"


def test_uri_without_identifier():
    uri = TotpEngine("ABCD1234").get_uri("App")
    assert uri == "otpauth://totp/App?secret=ABCD1234&algorithm=sha1&digits=6&period=30"


def test_uri_reflects_options():
    uri = TotpEngine("JBSWY3DPEHPK3PXP", digits=8, algorithm="SHA512", period=60).get_uri("App")
    assert uri.endswith("?secret=JBSWY3DPEHPK3PXP&algorithm=sha512&digits=8&period=60")


def test_uri_identity_object():
    uri = TotpEngine("ABCD1234").get_uri("App", User("bob"))
    assert urlsplit(uri).path == "/App:bob"


def test_uri_percent_encodes_label():
    uri = TotpEngine("ABCD1234").get_uri("My App", identifier="alice@example.com")
    parts = urlsplit(uri)
    assert parts.scheme == "otpauth"
    assert parts.netloc == "totp"
    assert parts.path == "/My%20App:alice%40example.com"
    name, ident = parts.path[1:].split(":")
    assert unquote(name) == "My App"
    assert unquote(ident) == "alice@example.com"


def test_uri_colon_in_identifier_is_escaped():
    uri = TotpEngine("ABCD1234").get_uri("App", identifier="a:b")
    assert urlsplit(uri).path == "/App:a%3Ab"


def test_uri_query_order():
    uri = TotpEngine("ABCD1234").get_uri("App")
    keys = [k for k, _ in parse_qsl(urlsplit(uri).query)]
    assert keys == ["secret", "algorithm", "digits", "period"]
