import json

from selenium_testcase import ConfigLoader, SessionSettings
from selenium_testcase.core.config_loader import SETTINGS_ENV_VAR


def write_settings(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_reads_nested_settings(tmp_path):
    settings_file = write_settings(tmp_path / "settings.json", {"selenium": {"browser": "chrome"}, "logging": {"level": "DEBUG"}})

    loader = ConfigLoader(settings_file)

    assert loader.get_setting("selenium.browser") == "chrome"
    assert loader.get_selenium_setting("browser") == "chrome"
    assert loader.get_logging_setting("level") == "DEBUG"
    assert loader.get_setting("selenium.host", "fallback") == "fallback"
    assert loader.get_setting("logging.level.sublevel", "default") == "default"


def test_missing_file_yields_empty_settings(tmp_path):
    loader = ConfigLoader(tmp_path / "nope.json")

    assert loader.get_settings() == {}


def test_invalid_json_yields_empty_settings(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("{not json", encoding="utf-8")

    assert ConfigLoader(settings_file).get_settings() == {}


def test_non_object_json_yields_empty_settings(tmp_path):
    settings_file = write_settings(tmp_path / "settings.json", ["a", "b"])

    assert ConfigLoader(settings_file).get_settings() == {}


def test_env_var_selects_settings_file(tmp_path, monkeypatch):
    settings_file = write_settings(tmp_path / "custom.json", {"selenium": {"host": "http://grid:4444"}})
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(settings_file))

    assert ConfigLoader().get_selenium_setting("host") == "http://grid:4444"


def test_default_file_is_under_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config").mkdir()
    write_settings(tmp_path / "config" / "settings.json", {"selenium": {"browser": "edge"}})

    assert ConfigLoader().get_selenium_setting("browser") == "edge"


def test_session_settings_from_config_loader(tmp_path):
    settings_file = write_settings(tmp_path / "settings.json", {
        "selenium": {"browser": "chrome", "proxy_host": "proxy", "proxy_port": 8080, "headless": True},
    })

    settings = SessionSettings.from_config_loader(ConfigLoader(settings_file))

    assert settings.browser == "chrome"
    assert settings.proxy_port == 8080
    assert settings.headless is True
    assert settings.connection_timeout == 30.0


def test_session_settings_defaults_without_file(tmp_path):
    settings = SessionSettings.from_config_loader(ConfigLoader(tmp_path / "nope.json"))

    assert settings == SessionSettings()


def test_data_models_does_not_import_the_loader_at_module_level():
    from selenium_testcase import data_models

    assert not hasattr(data_models, "ConfigLoader")
