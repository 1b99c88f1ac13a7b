"""
Configuration Management Module

Builds the nested settings dict the whole application is wired from. Values come
from the process environment, optionally seeded from a .env file (python-dotenv
never overrides variables that are already set). Invalid values fall back to
their defaults with a printed warning rather than aborting start-up.

Environment variables:
- DATA_DIR, LOG_LEVEL, DEBUG_MODE
- STORAGE_BACKEND (file|memory), STORAGE_QUOTA_BYTES
- REVIEW_DELAY, MATCH_DELAY, COVER_LETTER_DELAY (seconds)
- REVIEW_SCORER, MATCH_SCORER, COVER_LETTER_GENERATOR
- LOG_CONSOLE_OUTPUT
"""

import os
from dotenv import load_dotenv
from pathlib import Path

from constants import TimingConstants

VALID_BACKENDS = ('file', 'memory')
VALID_REVIEW_SCORERS = ('baseline',)
VALID_MATCH_SCORERS = ('baseline', 'keyword')
VALID_GENERATORS = ('template',)


def _parse_delay(config: dict, key: str, default: float, warnings: list[str]) -> None:
    """Coerce an analysis delay to a float within [0, MAX_ANALYSIS_DELAY]."""
    raw = config['analysis'].get(key)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        warnings.append(f"Invalid {key.upper()} value '{raw}'. Using default: {default}")
        config['analysis'][key] = default
        return

    if value < 0 or value > TimingConstants.MAX_ANALYSIS_DELAY:
        warnings.append(
            f"{key.upper()} must be between 0 and {TimingConstants.MAX_ANALYSIS_DELAY}. "
            f"Using default: {default}"
        )
        value = default
    config['analysis'][key] = value


def _validate_env_vars(config: dict) -> list[str]:
    """Coerce delays, quota and strategy names in place; return the warnings raised."""
    warnings = []

    _parse_delay(config, 'review_delay', TimingConstants.REVIEW_DELAY, warnings)
    _parse_delay(config, 'match_delay', TimingConstants.JOB_MATCH_DELAY, warnings)
    _parse_delay(config, 'cover_letter_delay', TimingConstants.COVER_LETTER_DELAY, warnings)

    quota = config['storage'].get('quota_bytes')
    if quota in (None, ''):
        config['storage']['quota_bytes'] = None
    else:
        try:
            config['storage']['quota_bytes'] = int(quota)
        except ValueError:
            warnings.append(f"Invalid STORAGE_QUOTA_BYTES value '{quota}'. Quota disabled")
            config['storage']['quota_bytes'] = None

    if config['storage']['backend'] not in VALID_BACKENDS:
        warnings.append(
            f"Unknown STORAGE_BACKEND '{config['storage']['backend']}'. Using default: file"
        )
        config['storage']['backend'] = 'file'

    strategy_checks = [
        ('review_scorer', VALID_REVIEW_SCORERS, 'baseline'),
        ('match_scorer', VALID_MATCH_SCORERS, 'baseline'),
        ('cover_letter_generator', VALID_GENERATORS, 'template'),
    ]
    for key, valid, default in strategy_checks:
        if config['analysis'][key] not in valid:
            warnings.append(f"Unknown {key.upper()} '{config['analysis'][key]}'. Using default: {default}")
            config['analysis'][key] = default

    return warnings


def _setup_data_directories(config: dict) -> list[str]:
    """Create <data_dir>, logs/ and exports/ for the file backend."""
    warnings = []
    base = Path(config['system']['data_dir'])
    for dir_path in [base, base / 'logs', base / 'exports']:
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            warnings.append(f"Could not create '{dir_path}': {e}")

    return warnings


def _validate_critical_settings(config: dict) -> list[str]:
    """data_dir must be set and log_level must be a known level."""
    warnings = []
    system = config['system']
    if not system.get('data_dir'):
        warnings.append("No DATA_DIR specified, using './data'")
        system['data_dir'] = './data'

    if system.get('log_level') not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        warnings.append(f"Invalid LOG_LEVEL '{system.get('log_level')}', using 'INFO'")
        system['log_level'] = 'INFO'
    return warnings


def load_settings(env_file: str | Path | None = None) -> dict:
    """
    Load and validate all configuration settings.

    Values come from the environment (optionally seeded from a .env file);
    invalid values fall back to defaults and a warning is printed.
    """
    load_dotenv(dotenv_path=env_file)

    warnings = []

    config = {
        'system': {
            'data_dir': os.getenv('DATA_DIR', './data').strip(),
            'log_level': os.getenv('LOG_LEVEL', 'INFO').strip().upper(),
            'debug_mode': os.getenv('DEBUG_MODE', 'False').lower() == 'true',
        },
        'storage': {
            'backend': os.getenv('STORAGE_BACKEND', 'file').strip().lower(),
            'quota_bytes': os.getenv('STORAGE_QUOTA_BYTES', '').strip(),
        },
        'analysis': {
            'review_delay': os.getenv('REVIEW_DELAY', str(TimingConstants.REVIEW_DELAY)),
            'match_delay': os.getenv('MATCH_DELAY', str(TimingConstants.JOB_MATCH_DELAY)),
            'cover_letter_delay': os.getenv(
                'COVER_LETTER_DELAY', str(TimingConstants.COVER_LETTER_DELAY)
            ),
            'review_scorer': os.getenv('REVIEW_SCORER', 'baseline').strip().lower(),
            'match_scorer': os.getenv('MATCH_SCORER', 'baseline').strip().lower(),
            'cover_letter_generator': os.getenv('COVER_LETTER_GENERATOR', 'template').strip().lower(),
        },
        'logging': {
            'console_output': os.getenv('LOG_CONSOLE_OUTPUT', 'True').lower() == 'true',
        },
    }

    warnings.extend(_validate_critical_settings(config))
    warnings.extend(_validate_env_vars(config))

    if config['storage']['backend'] == 'file':
        warnings.extend(_setup_data_directories(config))

    for warning in warnings:
        print(f"[Settings] WARNING: {warning}")

    return config
