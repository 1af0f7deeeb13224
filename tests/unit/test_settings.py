from pathlib import Path

import pytest
from pydantic import ValidationError

from docgenius.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert Settings().app_env == "dev"

    def test_default_upload_ceiling_is_50_mib(self) -> None:
        assert Settings().max_upload_bytes == 50 * 1024 * 1024

    def test_default_recent_files_limit(self) -> None:
        assert Settings().recent_files_limit == 10

    def test_default_extraction_engine(self) -> None:
        assert Settings().extraction_engine == "placeholder"

    def test_default_generation_provider(self) -> None:
        assert Settings().generation_provider == "gemini"

    def test_default_gemini_model(self) -> None:
        assert Settings().generation_gemini_model_name == "gemini-2.5-flash"


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        assert Settings().app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_loads_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        assert Settings().port == 8080

    def test_loads_upload_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UPLOAD_DIR", "/tmp/docs")
        assert Settings().upload_dir == Path("/tmp/docs")

    def test_loads_cors_origins_as_json_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://a.example", "https://b.example"]')
        assert Settings().cors_allow_origins == ["https://a.example", "https://b.example"]

    def test_loads_generation_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GENERATION_PROVIDER", "openai")
        assert Settings().generation_provider == "openai"


class TestSettingsValidation:
    def test_invalid_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_max_upload_bytes_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_BYTES", "abc")
        with pytest.raises(ValidationError):
            Settings()
