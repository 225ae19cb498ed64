"""Unit tests for application settings configuration."""

from pathlib import Path

from opstrack.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-level .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_defaults_use_memory_storage(monkeypatch):
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    settings = Settings(_env_file=None)

    assert settings.storage_backend == "memory"
    assert settings.default_actor_id == 1
    assert settings.database_url.startswith("sqlite:///")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    monkeypatch.setenv("DEFAULT_ACTOR_ID", "7")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "sql"
    assert settings.default_actor_id == 7
