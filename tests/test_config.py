import pytest
from pydantic import ValidationError

from serendibgo.config import Config, load_config
from serendibgo.exceptions import ConfigError, ConfigIOError, ConfigParseError


def test_load_round_trip(write_config):
    path = write_config({"port": "localhost:8080", "env": "production"})
    cfg = load_config(path)
    assert cfg == Config(port="localhost:8080", env="production")


def test_load_accepts_str_path(write_config):
    path = write_config({"port": ":9000", "env": "dev"})
    assert load_config(str(path)).port == ":9000"


def test_unknown_fields_ignored(write_config):
    path = write_config({"port": ":8080", "env": "dev", "debug": True, "workers": 4})
    cfg = load_config(path)
    assert cfg.port == ":8080"
    assert not hasattr(cfg, "debug")


def test_missing_fields_are_empty(write_config):
    cfg = load_config(write_config({}))
    assert cfg.port == ""
    assert cfg.env == ""


def test_null_fields_are_empty(write_config):
    cfg = load_config(write_config('{"port": null, "env": "staging"}'))
    assert cfg.port == ""
    assert cfg.env == "staging"


def test_missing_file(tmp_path):
    path = tmp_path / "nope.json"
    with pytest.raises(ConfigIOError) as exc:
        load_config(path)
    assert exc.value.path == str(path)
    assert isinstance(exc.value.__cause__, OSError)


def test_directory_is_io_error(tmp_path):
    with pytest.raises(ConfigIOError):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "content",
    [
        "",
        "{",
        '{"port": ":8080",}',
        "not json",
        "[1, 2, 3]",
        '"just a string"',
    ],
)
def test_malformed_json(write_config, content):
    with pytest.raises(ConfigParseError):
        load_config(write_config(content))


@pytest.mark.parametrize("data", [{"port": 8080}, {"env": ["prod"]}, {"env": False}])
def test_wrong_field_types(write_config, data):
    with pytest.raises(ConfigParseError) as exc:
        load_config(write_config(data))
    assert isinstance(exc.value.__cause__, ValidationError)


def test_errors_share_base(tmp_path, write_config):
    for path in (tmp_path / "missing.json", write_config("{")):
        with pytest.raises(ConfigError):
            load_config(path)


def test_config_is_immutable():
    cfg = Config(port=":8080", env="dev")
    with pytest.raises(ValidationError):
        cfg.port = ":9090"


@pytest.mark.parametrize(
    "env, expected",
    [("development", True), ("Dev", True), ("production", False), ("", False)],
)
def test_is_development(env, expected):
    assert Config(env=env).is_development is expected
