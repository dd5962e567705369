from pathlib import Path

from core.config import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_DATASET_PATH,
    PROJECT_DIR,
    get_settings,
    settings_from_env,
)


def test_defaults():
    settings = settings_from_env({})
    assert settings.dataset_path == DEFAULT_DATASET_PATH
    assert settings.dataset_path.parts[-2:] == ("public", "hltb_dataset.csv")
    assert settings.sample_size == 500
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"


def test_env_overrides(tmp_path):
    settings = settings_from_env(
        {
            "HLTB_DATASET_PATH": str(tmp_path / "data.csv"),
            "HLTB_SAMPLE_SIZE": "250",
            "HLTB_CORS_ORIGINS": "https://a.example, ,https://b.example",
            "HLTB_LOG_LEVEL": "debug",
        }
    )
    assert settings.dataset_path == tmp_path / "data.csv"
    assert settings.sample_size == 250
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.log_level == "DEBUG"


def test_relative_dataset_path_is_project_relative():
    settings = settings_from_env({"HLTB_DATASET_PATH": "data/games.csv"})
    assert settings.dataset_path == PROJECT_DIR / Path("data/games.csv")


def test_malformed_sample_size_falls_back():
    assert settings_from_env({"HLTB_SAMPLE_SIZE": "lots"}).sample_size == 500
    assert settings_from_env({"HLTB_SAMPLE_SIZE": "-4"}).sample_size == 500


def test_get_settings_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("HLTB_SAMPLE_SIZE", "42")
    get_settings.cache_clear()
    assert get_settings().sample_size == 42
    assert get_settings() is get_settings()
