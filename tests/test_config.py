"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from api_envelope.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("API_ENVELOPE_DEFAULT_LIMIT", raising=False)
    monkeypatch.delenv("API_ENVELOPE_MAX_LIMIT", raising=False)
    s = Settings(_env_file=None)
    assert (s.default_limit, s.max_limit) == (10, 100)


def test_env_override(monkeypatch):
    monkeypatch.setenv("API_ENVELOPE_MAX_LIMIT", "250")
    assert Settings(_env_file=None).max_limit == 250


def test_default_above_max_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, default_limit=200, max_limit=100)


def test_non_positive_limit_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, max_limit=0)
