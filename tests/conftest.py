"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def now():
    """Fixed evaluation time: noon on a known day."""
    return datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def today(now):
    return now.date()


@pytest.fixture
def days_ago(today):
    """Factory for dates relative to the fixed day."""
    def _days_ago(n: int) -> date:
        return today - timedelta(days=n)
    return _days_ago


@pytest.fixture
def kata_file(tmp_path):
    """A small kata file with one practiced and one untouched kata."""
    path = tmp_path / "katas.yaml"
    path.write_text(
        "- name: fizzbuzz\n"
        "  url: https://codingdojo.org/kata/FizzBuzz/\n"
        "  done:\n"
        "    - '2024-06-01'\n"
        "    - '2024-06-10'\n"
        "- name: bowling\n"
        "  url: https://codingdojo.org/kata/Bowling/\n",
        encoding="utf-8",
    )
    return path
