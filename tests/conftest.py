"""
Pytest Configuration and Shared Fixtures

Sets up the import path and provides the shared fixtures used by the unit and
integration tests.

Fixtures:
---------
- mock_settings: Application settings pointing at a temporary data dir, with an
  in-memory storage backend and zero analysis latency
- backend: In-memory storage medium
- store: PersistenceStore over `backend`
- logs_manager: LogsManager with console output disabled
- controller: Controller wired to the fixtures above
- saved_cv: A CV already stored in `store`

Usage:
------
```python
@pytest.mark.asyncio
async def test_something(controller, saved_cv):
    review = await controller.review_cv(cv_id=saved_cv.id)
    assert review.cv_id == saved_cv.id
```

Notes:
------
- Uses pytest-asyncio for async test support (tests are marked explicitly)
"""

import sys
from pathlib import Path

import pytest

# Add the project root directory to Python path (using pathlib)
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

# Add pytest-asyncio configuration
pytest_plugins = ["pytest_asyncio"]

from models import CVSection  # noqa: E402
from orchestrator.controller import Controller  # noqa: E402
from storage import LogsManager, MemoryStorageBackend, PersistenceStore  # noqa: E402


@pytest.fixture
def mock_settings(tmp_path):
    """Provide mock application settings."""
    return {
        'system': {
            'data_dir': str(tmp_path / 'data'),
            'log_level': 'DEBUG',
            'debug_mode': True,
        },
        'storage': {
            'backend': 'memory',
            'quota_bytes': None,
        },
        'analysis': {
            'review_delay': 0.0,
            'match_delay': 0.0,
            'cover_letter_delay': 0.0,
            'review_scorer': 'baseline',
            'match_scorer': 'baseline',
            'cover_letter_generator': 'template',
        },
        'logging': {
            'console_output': False,
        },
    }


@pytest.fixture
def backend():
    return MemoryStorageBackend()


@pytest.fixture
def store(backend):
    return PersistenceStore(backend)


@pytest.fixture
def logs_manager(mock_settings):
    return LogsManager(mock_settings)


@pytest.fixture
def controller(mock_settings, store, logs_manager):
    return Controller(mock_settings, store=store, logs_manager=logs_manager)


@pytest.fixture
def saved_cv(store):
    return store.create_cv(
        name="Backend Engineer CV",
        sections=[
            CVSection(title="Summary", content="Backend engineer with five years of experience."),
            CVSection(title="Skills", content="Python, SQL, Docker, Git"),
        ],
    )
