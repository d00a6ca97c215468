"""
Pytest configuration and shared fixtures

Common fixtures used across multiple test files are defined here.
"""
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add api directory to path for imports
api_path = Path(__file__).parent.parent / "api"
if not api_path.exists():
    # Running in Docker where api contents are at /app directly
    api_path = Path(__file__).parent.parent
sys.path.insert(0, str(api_path))


# =============================================================================
# Filesystem Fixtures
# =============================================================================

@pytest.fixture
def content_root(tmp_path):
    """Create an empty content root directory."""
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def create_file(content_root):
    """Create a file below the content root: create_file("img/x.jpg")"""
    def _create(relative_path: str) -> Path:
        path = content_root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"data")
        return path
    return _create


# =============================================================================
# Reference Index Fixtures
# =============================================================================

@pytest.fixture
def refindex_db(tmp_path):
    """Path of a temporary reference index database with schema."""
    from refindex.reference_store import SqliteReferenceStore

    db_path = str(tmp_path / "refindex.db")
    SqliteReferenceStore(db_path).ensure_schema()
    return db_path


@pytest.fixture
def reference_store(refindex_db):
    """SqliteReferenceStore on the temporary database."""
    from refindex.reference_store import SqliteReferenceStore
    return SqliteReferenceStore(refindex_db)


@pytest.fixture
def mock_store():
    """In-memory store double: set .managed / .soft, inspect clear_reference_value."""
    store = Mock()
    store.managed = []
    store.soft = []
    store.query_file_references.side_effect = (
        lambda softref_present: list(store.soft if softref_present else store.managed)
    )
    store.clear_reference_value.return_value = None
    return store


@pytest.fixture
def mock_prober():
    """Prober double answering from a set of existing paths."""
    prober = Mock()
    prober.existing = set()
    prober.exists.side_effect = lambda path: path in prober.existing
    return prober
