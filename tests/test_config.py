from __future__ import annotations

from lotto_viewer import config


def test_default_analysis_url(monkeypatch):
    monkeypatch.delenv("ANALYSIS_API_URL", raising=False)

    assert config.resolve_analysis_api_url() == config.DEFAULT_ANALYSIS_API_URL


def test_analysis_url_from_env(monkeypatch):
    monkeypatch.setenv("ANALYSIS_API_URL", " http://10.0.2.2:3000/lotto/analyze ")

    assert config.resolve_analysis_api_url() == "http://10.0.2.2:3000/lotto/analyze"


def test_get_config_by_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert config.get_config() is config.ProductionConfig

    monkeypatch.setenv("APP_ENV", "development")
    assert config.get_config() is config.DevelopmentConfig


def test_env_number_parsing(monkeypatch):
    monkeypatch.setenv("ANALYSIS_API_TIMEOUT", "not-a-number")
    assert config._env_float("ANALYSIS_API_TIMEOUT", 30.0) == 30.0

    monkeypatch.setenv("ANALYSIS_API_RETRIES", "2")
    assert config._env_int("ANALYSIS_API_RETRIES", 0) == 2
