# -*- coding: utf-8 -*-
"""
Shared pytest fixtures.
"""
import os
import sys
from pathlib import Path

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from repositories.database import Database  # noqa: E402
from repositories.seed import seed_database  # noqa: E402


@pytest.fixture
def test_db(tmp_path):
    """Empty, initialized database in a temporary file."""
    db = Database(db_path=tmp_path / "test_servicedesk.db")
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def seeded_db(test_db):
    """Database with the demo customers and technicians."""
    seed_database(test_db)
    return test_db
