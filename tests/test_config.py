"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from faleproxy.config import Settings, load_settings
from faleproxy.models.document import SubstitutionRule


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.substitution_rule() == SubstitutionRule(find="yale", replace="fale")
    assert settings.skip_tags == ["script", "style"]
    assert settings.content_scope == "body"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALEPROXY_FIND_WORD", "harvard")
    monkeypatch.setenv("FALEPROXY_REPLACE_WORD", "yale")
    monkeypatch.setenv("FALEPROXY_SKIP_TAGS", '["script", "code"]')
    monkeypatch.setenv("FALEPROXY_HTTP_TIMEOUT_S", "2.5")

    settings = Settings(_env_file=None)

    assert settings.substitution_rule() == SubstitutionRule(find="harvard", replace="yale")
    assert settings.skip_tags == ["script", "code"]
    assert settings.http_timeout_s == 2.5


def test_load_settings_from_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / "faleproxy.env"
    env_file.write_text("FALEPROXY_LOG_LEVEL=DEBUG\nFALEPROXY_CONTENT_SCOPE=document\n", encoding="utf-8")
    monkeypatch.setenv("FALEPROXY_ENV_FILE", str(env_file))

    settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.content_scope == "document"


def test_invalid_scope_is_rejected() -> None:
    with pytest.raises(ValueError):
        Settings(_env_file=None, content_scope="head")
