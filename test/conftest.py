"""
Test Configuration and Fixtures

Unit tests only: use cases run against the in-memory repositories in
test/service/parking/unit/in_memory_repos.py, Scylla repositories against a mocked
ScyllaDatabase. Nothing here needs a running cluster.
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are built at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('DEPLOY_ENV', 'test')
    os.environ.setdefault('SCYLLA_KEYSPACE', 'appsisted')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402


@pytest.fixture(autouse=True)
def reset_container_overrides() -> Generator[None, None, None]:
    """Provider overrides never leak between tests"""
    yield
    container.reset_override()
    container.reset_singletons()
