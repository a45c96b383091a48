import pytest

from greeter.config import ConfigError, Settings, parse_port


def test_default_port():
    assert Settings.from_environ({}).port == 8080
    assert Settings.from_environ({"PORT": ""}).port == 8080


@pytest.mark.parametrize("value, expected", [("80", 80), ("9090", 9090), ("65535", 65535)])
def test_port_from_environ(value, expected):
    settings = Settings.from_environ({"PORT": value})
    assert settings.port == expected
    assert settings.host == "0.0.0.0"


@pytest.mark.parametrize("value", ["http", "0", "-1", "70000", "80.5"])
def test_invalid_port(value):
    with pytest.raises(ConfigError):
        parse_port(value)


def test_log_level():
    assert Settings.from_environ({}).log_level == "INFO"
    assert Settings.from_environ({"LOG_LEVEL": "debug"}).log_level == "DEBUG"
    with pytest.raises(ConfigError):
        Settings.from_environ({"LOG_LEVEL": "chatty"})
