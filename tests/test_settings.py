"""配置与路径测试"""

from pathlib import Path

import pytest

from editorial_workflow.infrastructure.config import AppSettings, get_settings
from editorial_workflow.infrastructure.config import paths


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestAppSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EDITORIAL_STORAGE__BACKEND", raising=False)
        settings = AppSettings(_env_file=None)

        assert settings.storage.backend == "json"
        assert settings.gateway.context == "BlogContext"
        assert settings.log_level == "WARNING"
        assert settings.logging.to_file is False

    def test_prefixed_nested_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("EDITORIAL_STORAGE__BACKEND", "memory")
        monkeypatch.setenv("EDITORIAL_STORAGE__DATA_DIR", str(tmp_path))
        monkeypatch.setenv("EDITORIAL_GATEWAY__CONTEXT", "NewsContext")
        monkeypatch.setenv("EDITORIAL_LOG_LEVEL", "DEBUG")

        settings = AppSettings(_env_file=None)

        assert settings.storage.backend == "memory"
        assert settings.storage.data_dir == tmp_path
        assert settings.gateway.context == "NewsContext"
        assert settings.log_level == "DEBUG"

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("BACKEND", "memory")
        monkeypatch.setenv("CONTEXT", "Other")

        settings = AppSettings(_env_file=None)

        assert settings.storage.backend == "json"
        assert settings.gateway.context == "BlogContext"

    def test_dotenv_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("EDITORIAL_DEBUG=true\nEDITORIAL_STORAGE__BACKEND=memory\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        settings = get_settings()

        assert settings.debug is True
        assert settings.storage.backend == "memory"
        assert get_settings() is settings


@pytest.mark.unit
class TestPaths:
    def test_dirs_created_under_platform_data_dir(self, tmp_path, monkeypatch):
        monkeypatch.setattr(paths.platformdirs, "user_data_dir", lambda *args: str(tmp_path / "data"))

        assert paths.get_storage_dir() == tmp_path / "data" / "data"
        assert paths.get_log_dir() == tmp_path / "data" / "logs"
        assert paths.get_storage_dir().is_dir()

    def test_env_file_prefers_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("", encoding="utf-8")
        assert paths.get_env_file_path() == Path.cwd() / ".env"

    def test_env_file_falls_back_to_config_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(paths.platformdirs, "user_config_dir", lambda *args: str(tmp_path / "config"))
        assert paths.get_env_file_path() == tmp_path / "config" / ".env"
