"""
Test Configuration

Environment variables are set before any application module is imported,
because settings and the loguru sinks are built at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    os.environ.setdefault('POSTGRES_DB', 'table_booking_test_db')

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

import pytest  # noqa: E402


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if '/unit/' in item.nodeid or item.nodeid.startswith('unit/'):
            item.add_marker(pytest.mark.unit)
