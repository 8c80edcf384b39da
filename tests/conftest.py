"""
Shared fixtures: every test that touches the database gets its own SQLite file
"""
from datetime import datetime, timedelta

import pytest

import mindtrack.storage as storage
from mindtrack.storage import DatabaseManager, init_database, set_db_manager


@pytest.fixture
def db_manager(tmp_path):
    previous = storage._db_manager
    manager = DatabaseManager(str(tmp_path / "mindtrack_test.db"))
    init_database(manager)
    set_db_manager(manager)
    yield manager
    set_db_manager(previous)


@pytest.fixture
def seeded_db(db_manager):
    """Database with the shared default activity types"""
    from mindtrack.server.services.activity_service import initialize_default_activity_types
    initialize_default_activity_types()
    return db_manager


def make_record(type_id, name, start, minutes, color=None):
    """Record dict in the shape returned by the record store"""
    return {
        'id': f"{type_id}-{start.isoformat()}",
        'activity_type_id': type_id,
        'activity_type_name': name,
        'activity_type_color': color,
        'start_time': start,
        'end_time': start + timedelta(minutes=minutes),
    }


DAY_START = datetime(2025, 3, 10, 0, 0, 0)
