"""totpcore — TOTP/HOTP generation and verification (RFC 6238 / RFC 4226)."""

from totpcore.config import Algorithm, Settings, settings
from totpcore.engine import TotpEngine, generate_secret
from totpcore.exceptions import (
    InvalidConfiguration,
    InvalidCounter,
    InvalidSecret,
    TotpError,
    UnsupportedAlgorithm,
)
from totpcore.hotp import format_code, hotp
from totpcore.models import GeneratedSecret, TotpOptions

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "GeneratedSecret",
    "InvalidConfiguration",
    "InvalidCounter",
    "InvalidSecret",
    "Settings",
    "TotpEngine",
    "TotpError",
    "TotpOptions",
    "UnsupportedAlgorithm",
    "format_code",
    "generate_secret",
    "hotp",
    "settings",
]
