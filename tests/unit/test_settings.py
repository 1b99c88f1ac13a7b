"""
Unit Tests for configuration loading
"""

import pytest

from config import load_settings
from constants import TimingConstants

ENV_KEYS = [
    'DATA_DIR', 'LOG_LEVEL', 'DEBUG_MODE', 'STORAGE_BACKEND', 'STORAGE_QUOTA_BYTES',
    'REVIEW_DELAY', 'MATCH_DELAY', 'COVER_LETTER_DELAY', 'REVIEW_SCORER', 'MATCH_SCORER',
    'COVER_LETTER_GENERATOR', 'LOG_CONSOLE_OUTPUT',
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Unset every setting (restored afterwards, including keys set by .env loading)."""
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.setenv('DATA_DIR', str(tmp_path / 'data'))
    return monkeypatch


@pytest.fixture
def empty_env_file(tmp_path):
    path = tmp_path / 'empty.env'
    path.write_text("")
    return path


def test_defaults(clean_env, empty_env_file, tmp_path):
    settings = load_settings(env_file=empty_env_file)

    assert settings['system']['log_level'] == 'INFO'
    assert settings['system']['debug_mode'] is False
    assert settings['storage'] == {'backend': 'file', 'quota_bytes': None}
    assert settings['analysis']['review_delay'] == TimingConstants.REVIEW_DELAY
    assert settings['analysis']['match_delay'] == TimingConstants.JOB_MATCH_DELAY
    assert settings['analysis']['cover_letter_delay'] == TimingConstants.COVER_LETTER_DELAY
    assert settings['analysis']['match_scorer'] == 'baseline'
    assert settings['logging']['console_output'] is True
    assert (tmp_path / 'data' / 'logs').is_dir()
    assert (tmp_path / 'data' / 'exports').is_dir()


def test_environment_overrides(clean_env, empty_env_file):
    clean_env.setenv('STORAGE_BACKEND', 'Memory')
    clean_env.setenv('STORAGE_QUOTA_BYTES', '1024')
    clean_env.setenv('REVIEW_DELAY', '0.5')
    clean_env.setenv('MATCH_SCORER', 'keyword')
    clean_env.setenv('LOG_LEVEL', 'debug')
    clean_env.setenv('LOG_CONSOLE_OUTPUT', 'false')

    settings = load_settings(env_file=empty_env_file)

    assert settings['storage'] == {'backend': 'memory', 'quota_bytes': 1024}
    assert settings['analysis']['review_delay'] == 0.5
    assert settings['analysis']['match_scorer'] == 'keyword'
    assert settings['system']['log_level'] == 'DEBUG'
    assert settings['logging']['console_output'] is False


def test_invalid_values_fall_back_with_warnings(clean_env, empty_env_file, capsys):
    clean_env.setenv('STORAGE_BACKEND', 'cloud')
    clean_env.setenv('STORAGE_QUOTA_BYTES', 'lots')
    clean_env.setenv('MATCH_DELAY', 'soon')
    clean_env.setenv('COVER_LETTER_DELAY', '-1')
    clean_env.setenv('MATCH_SCORER', 'gpt')
    clean_env.setenv('LOG_LEVEL', 'LOUD')

    settings = load_settings(env_file=empty_env_file)

    assert settings['storage'] == {'backend': 'file', 'quota_bytes': None}
    assert settings['analysis']['match_delay'] == TimingConstants.JOB_MATCH_DELAY
    assert settings['analysis']['cover_letter_delay'] == TimingConstants.COVER_LETTER_DELAY
    assert settings['analysis']['match_scorer'] == 'baseline'
    assert settings['system']['log_level'] == 'INFO'
    assert capsys.readouterr().out.count("[Settings] WARNING:") == 6


def test_values_from_env_file(clean_env, tmp_path):
    env_file = tmp_path / '.env'
    env_file.write_text("STORAGE_BACKEND=memory\nREVIEW_DELAY=0\nMATCH_SCORER=keyword\n")

    settings = load_settings(env_file=env_file)

    assert settings['storage']['backend'] == 'memory'
    assert settings['analysis']['review_delay'] == 0.0
    assert settings['analysis']['match_scorer'] == 'keyword'
