"""
Unit tests for configuration loading and logger setup.
"""
import logging
from pathlib import Path

import pytest

REPO_CONF = Path(__file__).resolve().parent.parent / 'conf'


def _write_conf(path, text):
    path.write_text(text)
    return path


# -----------------------------------------------------------------------
# Prediction config tests
# -----------------------------------------------------------------------

class TestPredictionConfig:
    """Tests for config.load_prediction_config."""

    def test_defaults(self):
        """Built-in defaults."""
        from tide_predictor.config import PredictionConfig
        config = PredictionConfig()
        assert config.time_fidelity == 600
        assert config.node_corrections == 'iho'
        assert config.extremes_buffer_hours == 36.0
        assert config.correction_interval_hours == 24.0
        assert (config.high_label, config.low_label) == ('High', 'Low')

    def test_repo_config_matches_defaults(self):
        """The shipped config file restates the defaults."""
        from tide_predictor.config import PredictionConfig, load_prediction_config
        config = load_prediction_config(REPO_CONF / 'tide_predictor.conf')
        assert config == PredictionConfig()

    def test_missing_file(self, tmp_path):
        """A missing file falls back to defaults."""
        from tide_predictor.config import PredictionConfig, load_prediction_config
        assert load_prediction_config(tmp_path / 'absent.conf') == PredictionConfig()

    def test_overrides(self, tmp_path):
        """Values in the file override the defaults."""
        from tide_predictor.config import load_prediction_config
        path = _write_conf(tmp_path / 'tide.conf', (
            '[prediction]\n'
            'time_fidelity = 300\n'
            'node_corrections = Schureman\n'
            'extremes_buffer_hours = 48\n'
            '\n'
            '[labels]\n'
            'high = HW\n'
            'low = LW\n'
        ))
        config = load_prediction_config(path)
        assert config.time_fidelity == 300
        assert config.node_corrections == 'schureman'
        assert config.extremes_buffer_hours == 48.0
        assert config.correction_interval_hours == 24.0
        assert (config.high_label, config.low_label) == ('HW', 'LW')

    def test_env_override(self, tmp_path, monkeypatch):
        """TIDE_PREDICTOR_CONFIG points at an alternate file."""
        from tide_predictor.config import load_prediction_config
        path = _write_conf(tmp_path / 'env.conf',
                           '[prediction]\ntime_fidelity = 120\n')
        monkeypatch.setenv('TIDE_PREDICTOR_CONFIG', str(path))
        assert load_prediction_config().time_fidelity == 120

    @pytest.mark.parametrize('value, match', [
        ('0', 'must be positive'),
        ('-60', 'must be positive'),
        ('ten', 'Invalid'),
    ])
    def test_invalid_values(self, tmp_path, value, match):
        """Non-positive or unparseable numbers are rejected."""
        from tide_predictor.config import load_prediction_config
        path = _write_conf(tmp_path / 'bad.conf',
                           f'[prediction]\ntime_fidelity = {value}\n')
        with pytest.raises(ValueError, match=match):
            load_prediction_config(path)

    def test_missing_section(self, tmp_path):
        """Absent sections read as empty."""
        from tide_predictor.utils import Utils
        path = _write_conf(tmp_path / 'other.conf', '[other]\nkey = 1\n')
        assert Utils(path).read_config_section('prediction') == {}
        assert Utils(path).read_config_section('other') == {'key': '1'}


# -----------------------------------------------------------------------
# Logger setup tests
# -----------------------------------------------------------------------

class TestSetupLogger:
    """Tests for utils.setup_logger."""

    def test_existing_logger_returned(self):
        """A supplied logger is used as is."""
        from tide_predictor.utils import setup_logger
        log = logging.getLogger('tide_predictor.test')
        assert setup_logger(log) is log

    def test_missing_log_config(self, tmp_path):
        """A missing logging config raises FileNotFoundError."""
        from tide_predictor.utils import setup_logger
        with pytest.raises(FileNotFoundError, match='Log config file not found'):
            setup_logger(log_config_file=tmp_path / 'absent.conf')

    def test_file_config(self):
        """The shipped logging config yields the package logger."""
        from tide_predictor.utils import setup_logger
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            log = setup_logger(log_config_file=REPO_CONF / 'logging.conf')
            assert log.name == 'tide_predictor'
            assert log.getEffectiveLevel() == logging.INFO
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
