"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import UIElement
from data.database import DatabaseManager
from data.db_models import Base


@pytest.fixture(scope="session")
def test_db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture
def test_db_session(test_db_engine):
    """Create fresh database session for each test."""
    Session = sessionmaker(bind=test_db_engine)
    session = Session()

    yield session

    # Rollback any uncommitted changes and close
    session.rollback()
    session.close()


@pytest.fixture
def db_manager(tmp_path):
    """File-backed database manager (usable from autosave timer threads)."""
    manager = DatabaseManager(f"sqlite:///{tmp_path / 'designs.db'}")
    manager.create_tables()
    yield manager
    manager.engine.dispose()


@pytest.fixture
def sample_forest():
    """
    Two root trees:

        root (div)
          header (header)
            title (h1, "Hello")
          body (section)
            cta (button, "Click")
        aside (aside)
    """
    title = UIElement(id='title', tag='h1', styles={'font_size': '24px'}, content='Hello')
    header = UIElement(id='header', tag='header', styles={'padding': '8px'}, children=[title])
    cta = UIElement(
        id='cta',
        tag='button',
        styles={'background_color': '#000000', 'color': '#ffffff'},
        content='Click'
    )
    body = UIElement(id='body', tag='section', styles={}, children=[cta])
    root = UIElement(
        id='root',
        tag='div',
        styles={'display': 'flex', 'flex_direction': 'column'},
        children=[header, body]
    )
    aside = UIElement(id='aside', tag='aside', styles={'width': '25%'})
    return [root, aside]
