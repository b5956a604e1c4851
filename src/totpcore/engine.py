"""Time-based one-time passwords (RFC 6238).

Codes are returned as ints. Callers that display a code must pad it with
:func:`totpcore.hotp.format_code`, otherwise ``7`` and ``000007`` look
different to a user.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import math
import time
from datetime import UTC, datetime
from typing import Callable
from urllib.parse import quote, urlencode

from totpcore.config import Algorithm, settings
from totpcore.exceptions import InvalidSecret
from totpcore.hotp import format_code, hotp
from totpcore.identity import HasIdentifier, resolve_identifier
from totpcore.models import GeneratedSecret, TotpOptions
from totpcore.randomness import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)

Timestamp = int | float | datetime

_STRIPPED_KEY_CHARS = str.maketrans("", "", "=+/")


class TotpEngine:
    """Generates and verifies codes for a single shared secret.

    Options are validated on construction; the secret itself is only
    decoded when a code is computed, so an undecodable secret raises
    InvalidSecret from now()/at()/verify() rather than here.
    """

    __slots__ = ("_secret", "_options", "_clock")

    def __init__(
        self,
        secret: str,
        *,
        digits: int | None = None,
        algorithm: Algorithm | str | None = None,
        period: int | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        if not isinstance(secret, str):
            raise InvalidSecret(f"Secret must be a str, got {type(secret).__name__}")
        self._secret = secret
        self._options = TotpOptions.build(digits=digits, period=period, algorithm=algorithm)
        self._clock = clock or time.time

    def __repr__(self) -> str:
        return (
            f"TotpEngine(algorithm={self.algorithm.value!r}, "
            f"digits={self.digits}, period={self.period})"
        )

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def options(self) -> TotpOptions:
        return self._options

    @property
    def digits(self) -> int:
        return self._options.digits

    @property
    def period(self) -> int:
        return self._options.period

    @property
    def algorithm(self) -> Algorithm:
        return self._options.algorithm

    # --- generation ---

    def timecode(self, timestamp: Timestamp) -> int:
        """Index of the period-aligned bucket containing ``timestamp``."""
        return _to_epoch_seconds(timestamp) // self.period

    def at(self, timestamp: Timestamp) -> int:
        """Code for an arbitrary moment, past or future."""
        return hotp(self._secret, self.timecode(timestamp), self.digits, self.algorithm)

    def now(self) -> int:
        """Code for the current clock time."""
        return self.at(self._clock())

    # --- verification ---

    def verify(self, candidate: int | str, *, for_time: Timestamp | None = None) -> bool:
        """Check a code against the current, previous and next period.

        Both sides are compared as zero-padded strings of exactly ``digits``
        characters. A string candidate must already carry its leading zeros,
        so "7" is rejected where "000007" is accepted; an int is padded.
        """
        expected = self._normalize_candidate(candidate)
        if expected is None:
            logger.debug("Rejected malformed TOTP candidate (digits=%d)", self.digits)
            return False

        now = _to_epoch_seconds(self._clock() if for_time is None else for_time)
        for ts in (now, now - self.period, now + self.period):
            if ts < 0:
                continue
            if hmac.compare_digest(format_code(self.at(ts), self.digits), expected):
                return True

        logger.debug(
            "TOTP verification failed (algorithm=%s, period=%d, digits=%d)",
            self.algorithm.value,
            self.period,
            self.digits,
        )
        return False

    def _normalize_candidate(self, candidate: int | str) -> str | None:
        if isinstance(candidate, bool):
            return None
        if isinstance(candidate, int):
            if 0 <= candidate < 10**self.digits:
                return format_code(candidate, self.digits)
            return None
        if isinstance(candidate, str):
            text = candidate.strip()
            if len(text) == self.digits and text.isascii() and text.isdigit():
                return text
        return None

    # --- provisioning ---

    def get_uri(self, name: str, identifier: str | HasIdentifier | None = None) -> str:
        """Build an otpauth:// URI for enrolling the secret in an authenticator app."""
        label = quote(name, safe="")
        if identifier is not None:
            label = f"{label}:{quote(resolve_identifier(identifier), safe='')}"

        query = urlencode(
            [
                ("secret", self._secret),
                ("algorithm", self.algorithm.value),
                ("digits", self.digits),
                ("period", self.period),
            ],
            quote_via=quote,
        )
        return f"otpauth://totp/{label}?{query}"

    @staticmethod
    def generate_secret(
        identifier: str | HasIdentifier,
        *,
        random_source: RandomSource | None = None,
    ) -> GeneratedSecret:
        """Provision a new secret from random uppercase words.

        The words are joined with spaces and run through HMAC-SHA512 keyed
        by ``identifier``; the Base32 digest, stripped of ``=+/``, is cut to
        the configured key length.
        """
        rng = random_source or SystemRandomSource()
        words = tuple(
            _random_word(rng, settings.secret_word_min_length, settings.secret_word_max_length)
            for _ in range(settings.secret_word_count)
        )

        phrase = " ".join(words)
        digest = hmac.new(
            resolve_identifier(identifier).encode("utf-8"),
            phrase.encode("utf-8"),
            hashlib.sha512,
        ).digest()
        key = base64.b32encode(digest).decode("ascii").translate(_STRIPPED_KEY_CHARS)

        logger.info("Generated TOTP secret from %d words", len(words))
        return GeneratedSecret(key=key[: settings.secret_key_length], words=words)


generate_secret = TotpEngine.generate_secret


def _random_word(rng: RandomSource, min_length: int, max_length: int) -> str:
    size = rng.randint(min_length, max_length)
    return "".join(chr(rng.randint(ord("A"), ord("Z"))) for _ in range(size))


def _to_epoch_seconds(timestamp: Timestamp) -> int:
    # Ints stay exact; floats are floored rather than truncated toward zero.
    # Naive datetimes are taken to be UTC.
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=UTC)
        return math.floor(timestamp.timestamp())
    if isinstance(timestamp, float):
        return math.floor(timestamp)
    if isinstance(timestamp, int) and not isinstance(timestamp, bool):
        return timestamp
    raise TypeError(f"Expected an int, float or datetime timestamp, got {type(timestamp).__name__}")
