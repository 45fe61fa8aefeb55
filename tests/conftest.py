"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

from datetime import date

import pytest

from etl.resume.chronology import ChronologyAnalyzer
from etl.resume.date_parser import DateParser

# "Present" in every fixture-based test resolves to this date
FIXED_TODAY = date(2024, 6, 15)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "ollama: marks tests as requiring a live Ollama server (deselect with '-m \"not ollama\"')"
    )


@pytest.fixture(scope="session")
def ollama_available():
    """Skip the requesting test unless an Ollama server is reachable."""
    from tests import is_ollama_available
    if not is_ollama_available():
        pytest.skip("Ollama server not available")
    return True


@pytest.fixture
def fixed_date_parser():
    return DateParser(today=lambda: FIXED_TODAY)


@pytest.fixture
def chronology_analyzer(fixed_date_parser):
    """ChronologyAnalyzer with default thresholds and a frozen clock."""
    return ChronologyAnalyzer(date_parser=fixed_date_parser)


@pytest.fixture(autouse=True)
def isolate_embedding_env(monkeypatch):
    """Keep a developer's EMBEDDING_* overrides out of config tests."""
    monkeypatch.delenv("EMBEDDING_BASE_URL", raising=False)
    monkeypatch.delenv("EMBEDDING_MODEL", raising=False)
