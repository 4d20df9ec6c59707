"""Tests for configuration and initialization."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from awaitkit import AwaitkitConfig, NotInitializedError, get_config, init
from awaitkit._config import current_config


class TestAwaitkitConfig:
    def test_default_values(self) -> None:
        config = AwaitkitConfig()
        assert config.log_level is None
        assert config.json_output is True
        assert config.trace_settlements is False

    def test_frozen(self) -> None:
        config = AwaitkitConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestInit:
    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(NotInitializedError, match='init'):
            get_config()

    def test_current_config_before_init_is_default(self) -> None:
        assert current_config() == AwaitkitConfig()

    def test_init_sets_config(self) -> None:
        config = init(trace_settlements=True)
        assert get_config() is config
        assert config.trace_settlements is True

    def test_log_level_is_normalised(self) -> None:
        with patch('awaitkit._config.configure_logging') as configure:
            config = init(log_level='debug', json_output=False)
        assert config.log_level == 'DEBUG'
        configure.assert_called_once_with('DEBUG', json_output=False)

    def test_no_log_level_leaves_logging_alone(self) -> None:
        with patch.dict('os.environ', {}, clear=True), patch('awaitkit._config.configure_logging') as configure:
            init()
        configure.assert_not_called()

    def test_environment_fallbacks(self) -> None:
        env = {'AWAITKIT_LOG_LEVEL': 'warning', 'AWAITKIT_LOG_JSON': 'no', 'AWAITKIT_TRACE': '1'}
        with patch.dict('os.environ', env, clear=True), patch('awaitkit._config.configure_logging'):
            config = init()
        assert config == AwaitkitConfig(log_level='WARNING', json_output=False, trace_settlements=True)

    def test_explicit_arguments_win_over_environment(self) -> None:
        with patch.dict('os.environ', {'AWAITKIT_TRACE': 'true'}, clear=True):
            config = init(trace_settlements=False)
        assert config.trace_settlements is False

    def test_unknown_flag_value_uses_default(self) -> None:
        with patch.dict('os.environ', {'AWAITKIT_TRACE': 'maybe'}, clear=True):
            config = init()
        assert config.trace_settlements is False
