"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the repository root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gemsite.core import SiteGenerator
from tests.fixtures import build_capsule


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "posix: mark as relying on POSIX file permissions")


# ============================================================================
# Source Tree Fixtures
# ============================================================================


@pytest.fixture
def capsule_dir(tmp_path):
    """Create a sample gemtext source tree."""
    return build_capsule(tmp_path)


@pytest.fixture
def output_dir(tmp_path):
    """Path for the generated site; not created."""
    return tmp_path / "public"


@pytest.fixture
def generator(capsule_dir, output_dir):
    """Create a quiet site generator for the sample tree."""
    return SiteGenerator(capsule_dir, output_dir, quiet=True)


@pytest.fixture
def single_page_dir(tmp_path):
    """Create a source tree holding a single index.gmi."""
    source = tmp_path / "single"
    source.mkdir()
    (source / "index.gmi").write_text("# Hi\n", encoding="utf-8")
    return source
