"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bcms_transliterator.core import Transliterator
from bcms_transliterator.orthography import Orthography
from tests.fixtures import SAMPLE_LATIN_TEXT, SAMPLE_CYRILLIC_TEXT


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "network: mark as requiring network access")


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def latin_engine():
    """Engine reading Latin text and producing Cyrillic."""
    return Transliterator(Orthography.LATIN)


@pytest.fixture
def cyrillic_engine():
    """Engine reading Cyrillic text and producing Latin."""
    return Transliterator(Orthography.CYRILLIC)


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def latin_file(tmp_path):
    """Create a UTF-8 file with Latin sample text."""
    file_path = tmp_path / "pesma.txt"
    file_path.write_text(SAMPLE_LATIN_TEXT, encoding="utf-8")
    return file_path


@pytest.fixture
def cyrillic_file(tmp_path):
    """Create a UTF-8 file with Cyrillic sample text."""
    file_path = tmp_path / "песма.txt"
    file_path.write_text(SAMPLE_CYRILLIC_TEXT, encoding="utf-8")
    return file_path


@pytest.fixture
def broken_file(tmp_path):
    """Create a file whose second line is not valid UTF-8."""
    file_path = tmp_path / "broken.txt"
    file_path.write_bytes(b"prvi\n\xff\xfe drugi\n" + "treći\n".encode("utf-8"))
    return file_path
