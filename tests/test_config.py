import pytest
import yaml

from core.config import API_KEY_ENV, get_tool_config, get_weather_settings, load_config

CONFIG = {
    "logging": {"directory": "logs"},
    "tools": [
        {"name": "other_tool", "config": {"api_key": "other"}},
        {"name": "weather_tool", "config": {"api_key": "from-yaml", "timeout": 5}},
    ],
}


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(CONFIG))
    return path


def test_load_config_reads_yaml(config_file):
    assert load_config(str(config_file)) == CONFIG


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "absent.yaml"))


def test_load_config_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("tools: [unclosed")

    with pytest.raises(yaml.YAMLError):
        load_config(str(path))


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_config(str(path)) == {}


def test_get_tool_config():
    assert get_tool_config(CONFIG, "weather_tool") == {"api_key": "from-yaml", "timeout": 5}
    assert get_tool_config(CONFIG, "missing_tool") is None


def test_weather_settings_prefer_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(API_KEY_ENV, "from-env")

    settings = get_weather_settings(CONFIG)

    assert settings == {"api_key": "from-env", "timeout": 5}
    assert CONFIG["tools"][1]["config"]["api_key"] == "from-yaml"


def test_weather_settings_read_dotenv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(API_KEY_ENV, raising=False)
    (tmp_path / ".env").write_text(f"{API_KEY_ENV}=from-dotenv\n")

    settings = get_weather_settings({})

    assert settings["api_key"] == "from-dotenv"
    monkeypatch.delenv(API_KEY_ENV, raising=False)
