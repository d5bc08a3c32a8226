import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from brave_mcp import config
from brave_mcp.errors import ConfigurationError


_ENV_NAMES = ("BRAVE_API_KEY", "BRAVE_API_BASE_URL", "BRAVE_HTTP_TIMEOUT", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    config.reload_from_env()


def test_defaults_when_unset(clean_env):
    config.reload_from_env()

    assert config.BRAVE_API_KEY is None
    assert config.BRAVE_API_BASE_URL == config.DEFAULT_API_BASE_URL
    assert config.BRAVE_HTTP_TIMEOUT is None
    assert config.LOG_LEVEL == "info"


def test_blank_values_fall_back(clean_env):
    clean_env.setenv("BRAVE_API_KEY", "   ")
    clean_env.setenv("BRAVE_API_BASE_URL", "")
    clean_env.setenv("LOG_LEVEL", " ")
    config.reload_from_env()

    assert config.BRAVE_API_KEY is None
    assert config.BRAVE_API_BASE_URL == config.DEFAULT_API_BASE_URL
    assert config.LOG_LEVEL == "info"


def test_values_are_trimmed(clean_env):
    clean_env.setenv("BRAVE_API_KEY", "  secret  ")
    clean_env.setenv("LOG_LEVEL", "DEBUG")
    clean_env.setenv("BRAVE_HTTP_TIMEOUT", "12.5")
    config.reload_from_env()

    assert config.require_api_key() == "secret"
    assert config.LOG_LEVEL == "debug"
    assert config.BRAVE_HTTP_TIMEOUT == 12.5


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_timeout_means_no_timeout(clean_env, raw):
    clean_env.setenv("BRAVE_HTTP_TIMEOUT", raw)
    config.reload_from_env()

    assert config.BRAVE_HTTP_TIMEOUT is None


def test_require_api_key_fails_without_key(clean_env):
    config.reload_from_env()

    with pytest.raises(ConfigurationError, match="BRAVE_API_KEY"):
        config.require_api_key()


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    original_level = root.level
    original_handlers = list(root.handlers)

    try:
        config.configure_logging("debug")
        assert root.level == logging.DEBUG

        config.configure_logging("nonsense")
        assert root.level == logging.INFO
    finally:
        root.handlers = original_handlers
        root.setLevel(original_level)
