import pytest

from ppcnn.config import Config, config_get_value
from ppcnn.utility import FileError


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "app.conf"
    path.write_text(
        "# full-line comment\n"
        "name = server\n"
        "port=10001 # trailing comment\n"
        "ratio,0.25\n"
        "count\t42abc\n"
        "lonely\n"
        "name = duplicate\n"
        "\n"
    )
    cfg = Config()
    cfg.load_from_file(str(path))
    return cfg


def test_values_are_parsed(config):
    assert config.get_value("name") == "server"
    assert config.get_value("port") == "10001"
    assert config.get_value("ratio") == "0.25"


def test_first_occurrence_wins(config):
    assert config.get_value("name") == "server"


def test_single_token_lines_and_comments_ignored(config):
    assert config.is_exist_key("lonely") is False
    assert config.is_exist_key("#") is False
    assert config.is_exist_key("port") is True


def test_get_value_missing_key_raises(config):
    with pytest.raises(KeyError):
        config.get_value("absent")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileError, match="Config file not found"):
        Config().load_from_file(str(tmp_path / "missing.conf"))


def test_empty_file_raises(tmp_path):
    path = tmp_path / "empty.conf"
    path.write_text("")
    with pytest.raises(FileError, match="Config file is empty"):
        Config().load_from_file(str(path))


def test_config_get_value_types(config):
    assert config_get_value(config, "name") == "server"
    assert config_get_value(config, "name", str) == "server"
    assert config_get_value(config, "port", int) == 10001
    assert config_get_value(config, "ratio", float) == 0.25


def test_config_get_value_numeric_prefix(config):
    assert config_get_value(config, "count", int) == 42


def test_config_get_value_not_a_number(config):
    with pytest.raises(ValueError):
        config_get_value(config, "name", int)
    with pytest.raises(ValueError):
        config_get_value(config, "name", float)


def test_config_get_value_missing_key(config):
    with pytest.raises(FileError, match=r"Invalid key string. \(absent\)"):
        config_get_value(config, "absent", int)


def test_config_get_value_unsupported_type(config):
    with pytest.raises(TypeError):
        config_get_value(config, "name", list)