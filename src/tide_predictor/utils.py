"""
Shared helpers: instant parsing, configuration file access and logger
setup.
"""
from __future__ import annotations

import configparser
import datetime as dt
import logging
import logging.config
import os
from numbers import Real
from pathlib import Path

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'TIDE_PREDICTOR_CONFIG'
"""Environment variable overriding the location of the INI config file."""

CONF_DIR = (Path(__file__).parent.parent.parent / 'conf').resolve()
"""Repository ``conf/`` directory holding the default config files."""


def to_timestamp(instant) -> pd.Timestamp:
    """
    Coerce *instant* to a timezone-aware UTC :class:`pandas.Timestamp`.

    Parameters
    ----------
    instant : datetime, pandas.Timestamp, numpy.datetime64, str or float
        Naive datetimes and strings without an offset are taken as UTC.
        Plain numbers are epoch seconds.

    Returns
    -------
    pandas.Timestamp

    Raises
    ------
    ValueError
        If *instant* is of an unsupported type or cannot be parsed.
    """
    if isinstance(instant, bool):
        raise ValueError(f'Invalid date format: {instant!r}')
    if isinstance(instant, (pd.Timestamp, dt.datetime, np.datetime64, str)):
        try:
            ts = pd.Timestamp(instant)
        except (TypeError, ValueError) as ex:
            raise ValueError(f'Invalid date format: {instant!r}') from ex
    elif isinstance(instant, (Real, np.number)):
        ts = pd.Timestamp(float(instant), unit='s')
    else:
        raise ValueError(
            f'Invalid date format: {instant!r}. Expected a datetime, '
            f'pandas.Timestamp, numpy.datetime64, ISO string or epoch seconds.'
        )
    if ts is pd.NaT:
        raise ValueError(f'Invalid date format: {instant!r}')
    if ts.tzinfo is None:
        return ts.tz_localize('UTC')
    return ts.tz_convert('UTC')


class Utils:
    """Access to the INI configuration file under ``conf/``."""

    def __init__(self, config_file: str | os.PathLike | None = None):
        self.config_file = config_file

    def get_config_file(self) -> Path:
        """Path of the active config file (env override, then ``conf/``)."""
        if self.config_file is not None:
            return Path(self.config_file)
        env = os.environ.get(CONFIG_ENV_VAR)
        if env:
            return Path(env)
        return CONF_DIR / 'tide_predictor.conf'

    def read_config_section(
        self,
        section: str,
        logger: logging.Logger | None = None,
    ) -> dict[str, str]:
        """
        Read one section of the config file.

        Returns an empty dict when the file or the section is absent.
        """
        _log = logger or logging.getLogger(__name__)
        config_file = self.get_config_file()
        parser = configparser.ConfigParser()
        if not parser.read(config_file):
            _log.debug('Config file %s not found; using defaults.', config_file)
            return {}
        if not parser.has_section(section):
            _log.debug('Config section [%s] missing in %s.', section, config_file)
            return {}
        return dict(parser.items(section))


def setup_logger(
    logger: logging.Logger | None = None,
    log_config_file: str | os.PathLike | None = None,
) -> logging.Logger:
    """Initialize logging from ``conf/logging.conf`` if no logger is given."""
    if logger is not None:
        return logger

    log_config_file = Path(log_config_file or CONF_DIR / 'logging.conf')
    if not log_config_file.is_file():
        raise FileNotFoundError(f'Log config file not found: {log_config_file}')

    logging.config.fileConfig(log_config_file, disable_existing_loggers=False)
    logger = logging.getLogger('tide_predictor')
    logger.info('Using log config %s', log_config_file)
    return logger
