"""Tests for configuration loading."""

from __future__ import annotations

import hashlib

import pytest
from pydantic import ValidationError

from totpcore.config import MAX_SECRET_KEY_LENGTH, Algorithm, Settings


def test_settings_defaults():
    s = Settings(_env_file=None)
    assert s.default_digits == 6
    assert s.default_period == 30
    assert s.default_algorithm == Algorithm.SHA1
    assert s.secret_word_count == 16
    assert s.secret_word_min_length == 4
    assert s.secret_word_max_length == 10
    assert s.secret_key_length == 16


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TOTP_DEFAULT_DIGITS", "8")
    monkeypatch.setenv("TOTP_DEFAULT_ALGORITHM", "sha256")
    s = Settings(_env_file=None)
    assert s.default_digits == 8
    assert s.default_algorithm == Algorithm.SHA256


def test_settings_rejects_non_positive_period(monkeypatch):
    monkeypatch.setenv("TOTP_DEFAULT_PERIOD", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_algorithm_enum():
    assert Algorithm.SHA1 == "sha1"
    assert Algorithm.SHA512 == "sha512"
    assert len(Algorithm) == 3


def test_algorithm_digestmod():
    assert Algorithm.SHA1.digestmod is hashlib.sha1
    assert Algorithm.SHA256.digestmod is hashlib.sha256
    assert Algorithm.SHA512.digestmod is hashlib.sha512


def test_settings_rejects_inverted_word_lengths():
    with pytest.raises(ValidationError, match="secret_word_min_length"):
        Settings(_env_file=None, secret_word_min_length=10, secret_word_max_length=4)


def test_settings_allows_fixed_word_length():
    s = Settings(_env_file=None, secret_word_min_length=6, secret_word_max_length=6)
    assert s.secret_word_min_length == s.secret_word_max_length == 6


def test_settings_caps_secret_key_length():
    assert Settings(_env_file=None, secret_key_length=MAX_SECRET_KEY_LENGTH).secret_key_length == 103
    with pytest.raises(ValidationError):
        Settings(_env_file=None, secret_key_length=MAX_SECRET_KEY_LENGTH + 1)


def test_settings_caps_default_digits(monkeypatch):
    monkeypatch.setenv("TOTP_DEFAULT_DIGITS", "11")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
