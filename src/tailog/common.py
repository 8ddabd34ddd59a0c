"""
common.py: Shared helpers for the tailog command line.

- Configuration (environment variables to a config dict).
- Logging setup.
- Console messages on stderr.
"""

import os
import sys
import logging
from pathlib import Path

from colorama import Fore, Style, just_fix_windows_console

# Environment variable -> config key
ENV_KEYS = {
    'TAILOG_LOG_LEVEL': 'LOG_LEVEL',
    'TAILOG_OUTFILE': 'OUTFILE',
}

DEFAULT_CONFIG = {
    'LOG_LEVEL': 'WARNING',
    'OUTFILE': None,
}


# =============================================================================
# CONFIGURATION
# =============================================================================

def load_config(environ=None) -> dict:
    """
    Build the config dict from TAILOG_* environment variables.

    Unset or empty variables keep their defaults.
    """
    if environ is None:
        environ = os.environ

    config = dict(DEFAULT_CONFIG)
    for env_name, key in ENV_KEYS.items():
        value = environ.get(env_name)
        if value:
            config[key] = value
    return config


# =============================================================================
# LOGGING
# =============================================================================

def setup_logging(config):
    """Configures Python's logging module."""
    log_level_str = (config.get('LOG_LEVEL') or 'WARNING').upper()
    log_file_path = config.get('OUTFILE', None)

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {log_level_str}')

    log_format = '%(asctime)s - %(levelname)s - %(message)s'

    # stdout carries the tail output, so log lines go to stderr
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file_path:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file_path))

    logging.basicConfig(level=numeric_level, format=log_format, handlers=handlers, force=True)
    logging.debug(f"Logging setup with level {log_level_str}.")


# =============================================================================
# CONSOLE OUTPUT
# =============================================================================

just_fix_windows_console()


def print_error(message: str):
    """Print an error line to stderr, in red when stderr is a terminal."""
    if sys.stderr.isatty():
        print(f"{Fore.RED}{message}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(message, file=sys.stderr)
