"""
Shared test fixtures

- box configurations built from the template catalog
- per-test SQLite database path
"""

import sys
from dataclasses import replace
from pathlib import Path

import pytest

# Add the project root to sys.path
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from catering.data import template_by_id  # noqa: E402


@pytest.fixture
def office_config():
    """Office Favorite: 6 boneless, Sweet BBQ, chips, NY cheesecake"""
    return template_by_id("office-favorite").config


@pytest.fixture
def game_day_config():
    """Game Day Combo: 6 bone-in (mixed), Classic Buffalo, coleslaw, brownie"""
    return template_by_id("game-day").config


@pytest.fixture
def veggie_config():
    return template_by_id("veggie-delight").config


@pytest.fixture
def noted_config(office_config):
    """A config that differs from the Office template only by its notes"""
    return replace(office_config, notes="no celery")


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    """Point persistence at a fresh SQLite file"""
    db_path = tmp_path / "catering.db"
    monkeypatch.setattr("catering.persistence.DB_PATH", str(db_path))
    return db_path
