# ABOUTME: Tests for debug mode configuration
# ABOUTME: Validates DEBUG env var enables verbose tracing

import os
from importlib import reload
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def restore_modules():
    """Reload config and debug after each test so DEBUG does not leak"""
    yield
    from surf_almanac import config, debug
    reload(config)
    reload(debug)


def test_debug_mode_disabled_by_default():
    """Debug mode should be disabled when env var not set"""
    # Mock dotenv.load_dotenv before reload to prevent .env override
    with patch("dotenv.load_dotenv"), patch.dict(os.environ, {}, clear=True):
        from surf_almanac import config
        reload(config)
        assert config.Config.DEBUG is False


def test_debug_mode_enabled_when_env_true():
    """Debug mode should be enabled when DEBUG=true"""
    with patch.dict(os.environ, {"DEBUG": "true"}):
        from surf_almanac import config
        reload(config)
        assert config.Config.DEBUG is True


def test_debug_mode_enabled_case_insensitive():
    """DEBUG=TRUE (uppercase) should also work"""
    with patch.dict(os.environ, {"DEBUG": "TRUE"}):
        from surf_almanac import config
        reload(config)
        assert config.Config.DEBUG is True


def test_debug_log_outputs_when_enabled(capsys):
    """debug_log should print categorized lines when DEBUG=true"""
    with patch.dict(os.environ, {"DEBUG": "true"}):
        from surf_almanac import config, debug
        reload(config)
        reload(debug)

        debug.debug_log("fetched 3 buoys", "ORCHESTRATOR")

    assert capsys.readouterr().out == "[ORCHESTRATOR] fetched 3 buoys\n"


def test_debug_log_silent_when_disabled(capsys):
    """debug_log should be silent when DEBUG=false"""
    with patch.dict(os.environ, {"DEBUG": "false"}):
        from surf_almanac import config, debug
        reload(config)
        reload(debug)

        debug.debug_log("test message")

    assert capsys.readouterr().out == ""
