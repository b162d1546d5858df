"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from structval.settings import Settings, get_settings
from structval.validator import SchemaValidator


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STRUCTVAL_MAX_DEPTH", raising=False)
        settings = Settings()
        assert settings.max_depth == 256
        assert settings.max_document_size == 5_000_000
        assert settings.max_node_count == 50_000

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STRUCTVAL_MAX_DEPTH", "8")
        monkeypatch.setenv("STRUCTVAL_MAX_NODE_COUNT", "100")
        settings = Settings()
        assert settings.max_depth == 8
        assert settings.max_node_count == 100

    def test_validator_uses_cached_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STRUCTVAL_MAX_DEPTH", "3")
        get_settings.cache_clear()
        try:
            assert SchemaValidator().max_depth == 3
        finally:
            get_settings.cache_clear()

    def test_explicit_depth_wins(self) -> None:
        assert SchemaValidator(max_depth=5).max_depth == 5
