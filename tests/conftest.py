"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from casefix import logging as casefix_logging
from casefix.context import CasefixContext
from casefix.options import CaseStyle, ConversionOptions, Scope


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "gui: mark as requiring PyQt5")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def no_log_file(monkeypatch):
    """Keep test runs from writing casefix_execution.log."""
    monkeypatch.setattr(casefix_logging, "log_file_path", None)


@pytest.fixture
def options():
    """Default conversion options."""
    return ConversionOptions()


@pytest.fixture
def upper():
    """Options converting the entire text to uppercase."""
    return ConversionOptions(style=CaseStyle.UPPERCASE)


@pytest.fixture
def chicago():
    """Options for Chicago title case."""
    return ConversionOptions(style=CaseStyle.CHICAGO)


@pytest.fixture
def identifiers_upper():
    """Uppercase limited to $$$START$$$ ... $$$END$$$ pairs."""
    return ConversionOptions(style=CaseStyle.UPPERCASE, scope=Scope.IDENTIFIERS)


@pytest.fixture
def ctx():
    """Create an empty processing context."""
    return CasefixContext()


@pytest.fixture
def data_file(tmp_path):
    """Path to a data file inside the test's temporary directory."""
    return tmp_path / ".casefix.txt"


# ============================================================================
# Sample Texts
# ============================================================================


@pytest.fixture
def sample_text():
    """Multi-sentence, multi-line text."""
    return (
        "the quick brown fox. it jumps over the lazy dog!\n"
        "a second line with NASA and iPhone.\n"
        "third line, end-to-end"
    )
