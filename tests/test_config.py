"""Tests for environment-driven settings."""

from app.config import Settings


def test_blank_timeout_in_env_means_no_timeout(monkeypatch):
    monkeypatch.setenv("HF_TIMEOUT_SECONDS", "")
    monkeypatch.setenv("HUGGINGFACE_API_TOKEN", "")
    settings = Settings(_env_file=None)
    assert settings.hf_timeout_seconds is None
    assert settings.huggingface_api_token == ""


def test_blank_timeout_in_dotenv_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("HUGGINGFACE_API_TOKEN=\nHF_TIMEOUT_SECONDS=\n", encoding="utf-8")
    settings = Settings(_env_file=env_file)
    assert settings.hf_timeout_seconds is None


def test_timeout_parsed_from_env(monkeypatch):
    monkeypatch.setenv("HF_TIMEOUT_SECONDS", "12.5")
    assert Settings(_env_file=None).hf_timeout_seconds == 12.5
