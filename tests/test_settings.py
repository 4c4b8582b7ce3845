import pytest

from svckit.settings import Settings, load_env


def test_defaults():
    settings = load_env({})
    assert settings.port == "8082"
    assert settings.db_host == "localhost"
    assert settings.db_user == "postgres"
    assert settings.db_port == "8080"
    assert settings.redis_port == "8081"
    assert settings.max_file_size == 5
    assert settings.district_file_path == "./data/districts.json"
    assert settings.sub_district_file_path == "./data/sub_districts.json"
    assert settings.province_file_path == "./data/provinces.json"


def test_defaults_match_dataclass():
    assert load_env({}) == Settings()


def test_overrides():
    settings = load_env({"PORT": "9000", "DB_NAME": "app", "MAX_FILE_SIZE": "12"})
    assert settings.port == "9000"
    assert settings.db_name == "app"
    assert settings.max_file_size == 12
    assert settings.db_host == "localhost"


def test_empty_value_uses_default():
    assert load_env({"PORT": ""}).port == "8082"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("REDIS_HOST", "cache.example.com")
    assert load_env().redis_host == "cache.example.com"


@pytest.mark.parametrize("raw", ["five", "1.5", "5_0", "99999999999999999999"])
def test_invalid_max_file_size(raw):
    with pytest.raises(ValueError, match="MAX_FILE_SIZE"):
        load_env({"MAX_FILE_SIZE": raw})


def test_settings_are_frozen():
    settings = load_env({})
    with pytest.raises(AttributeError):
        settings.port = "1"
    assert settings.port == "8082"