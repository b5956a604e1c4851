"""Errors raised by the TOTP engine.

A code mismatch during verification is not an error; ``verify`` returns False.
"""

from __future__ import annotations


class TotpError(Exception):
    """Base class for all totpcore errors."""


class InvalidConfiguration(TotpError, ValueError):
    """Digits, period or algorithm out of range."""


class UnsupportedAlgorithm(InvalidConfiguration):
    """Hash algorithm outside of sha1/sha256/sha512."""


class InvalidSecret(TotpError, ValueError):
    """Secret is empty or not valid Base32."""


class InvalidCounter(TotpError, ValueError):
    """HOTP counter does not fit in an unsigned 64-bit integer."""
