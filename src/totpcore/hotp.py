"""HMAC-based one-time passwords (RFC 4226) on top of pyotp.

TOTP is HOTP with a counter derived from the clock, so the engine only ever
feeds time codes through :func:`hotp`.
"""

from __future__ import annotations

import binascii

import pyotp

from totpcore.config import Algorithm
from totpcore.exceptions import InvalidCounter, InvalidSecret

# RFC 4226 counters are packed into 8 bytes
_MAX_COUNTER = 2**64 - 1


def normalize_secret(secret: str) -> str:
    """Strip spaces and padding so pyotp can restore the padding itself."""
    if not isinstance(secret, str):
        raise InvalidSecret(f"Secret must be a str, got {type(secret).__name__}")
    normalized = secret.replace(" ", "").upper().rstrip("=")
    if not normalized:
        raise InvalidSecret("Secret is empty")
    return normalized


def hotp(secret: str, counter: int, digits: int = 6, algorithm: Algorithm = Algorithm.SHA1) -> int:
    """Compute the HOTP value for a Base32 secret and counter.

    Returns the numeric code; use :func:`format_code` to get the
    zero-padded text a user would type.
    """
    if not 0 <= counter <= _MAX_COUNTER:
        raise InvalidCounter(f"HOTP counter {counter} outside 0..2**64-1")

    otp = pyotp.HOTP(normalize_secret(secret), digits=digits, digest=Algorithm(algorithm).digestmod)
    try:
        code = otp.at(counter)
    except (binascii.Error, ValueError) as e:
        raise InvalidSecret("Secret is not valid Base32") from e
    return int(code)


def format_code(code: int, digits: int) -> str:
    """Render a code as text, left-padded with zeros to ``digits``."""
    return f"{code:0{digits}d}"
