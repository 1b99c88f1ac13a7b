"""
Unit Tests for LogsManager
"""

import pytest

from storage import LogsManager


def test_invalid_level_falls_back_to_info(mock_settings):
    mock_settings['system']['log_level'] = 'VERBOSE'
    assert LogsManager(mock_settings).log_level == 'INFO'


@pytest.mark.asyncio
async def test_console_output_respects_level(mock_settings, capsys):
    mock_settings['system']['log_level'] = 'WARNING'
    mock_settings['logging']['console_output'] = True
    logs = LogsManager(mock_settings)

    await logs.info("quiet message")
    await logs.warning("loud message")
    await logs.error("broken")

    out = capsys.readouterr().out
    assert "quiet message" not in out
    assert "[WARNING] loud message" in out
    assert "[ERROR] broken" in out


@pytest.mark.asyncio
async def test_file_logging_lifecycle(mock_settings):
    logs = LogsManager(mock_settings)
    await logs.initialize()
    assert logs.is_initialized

    await logs.log_workflow_started("CV review")
    await logs.log_workflow_completed("CV review", "abc123")
    await logs.shutdown()

    assert not logs.is_initialized
    content = logs.log_file.read_text()
    assert "CV review started" in content
    assert "CV review completed: abc123" in content
