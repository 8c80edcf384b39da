"""
Database configuration
Declarative metadata for every MindTrack table
"""

# Timestamp format shared by every TEXT time column
DB_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Activity type table (shared default types + user-owned types)
ACTIVITY_TYPE_CONFIG = {
    'table_name': 'activity_type',
    'columns': {
        'id': {
            'type': 'TEXT',
            'constraints': ['PRIMARY KEY'],
            'comment': 'UUID4 identifier'
        },
        'name': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': 'Display name (e.g. 업무, SNS)'
        },
        'icon': {
            'type': 'TEXT',
            'constraints': [],
            'comment': 'Icon key used by the frontend'
        },
        'color': {
            'type': 'TEXT',
            'constraints': [],
            'comment': 'Hex color (e.g. #4F46E5)'
        },
        'is_default': {
            'type': 'INTEGER',
            'constraints': ['NOT NULL', 'DEFAULT 0'],
            'comment': '1: shared with every user, 0: owned by user_id'
        },
        'user_id': {
            'type': 'TEXT',
            'constraints': [],
            'comment': 'Owner id, NULL for shared types'
        },
    },
    'table_constraints': [
        'CHECK((is_default = 1 AND user_id IS NULL) OR (is_default = 0 AND user_id IS NOT NULL))'
    ],
    'indexes': [
        {'name': 'idx_activity_type_user', 'columns': ['user_id']},
        {'name': 'idx_activity_type_default', 'columns': ['is_default', 'name']},
    ],
    'timestamps': True  # created_at, updated_at
}

# Activity record table
ACTIVITY_RECORD_CONFIG = {
    'table_name': 'activity_record',
    'columns': {
        'id': {
            'type': 'TEXT',
            'constraints': ['PRIMARY KEY'],
            'comment': 'UUID4 identifier'
        },
        'user_id': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': 'Owner id'
        },
        'activity_type_id': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': 'References activity_type.id'
        },
        'start_time': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': 'Activity start (YYYY-MM-DD HH:MM:SS)'
        },
        'end_time': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': 'Activity end (YYYY-MM-DD HH:MM:SS)'
        },
        'note': {
            'type': 'TEXT',
            'constraints': [],
            'comment': 'Free-form note'
        },
        'recorded_at': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': 'When the record was written'
        },
    },
    'table_constraints': [
        'FOREIGN KEY (activity_type_id) REFERENCES activity_type(id)',
        'CHECK(end_time > start_time)'
    ],
    'indexes': [
        {'name': 'idx_activity_record_user_start', 'columns': ['user_id', 'start_time']},
        {'name': 'idx_activity_record_type', 'columns': ['activity_type_id']},
    ],
    'timestamps': False
}

# Mindset self-test table
SELF_TEST_CONFIG = {
    'table_name': 'self_test',
    'columns': {
        'id': {
            'type': 'TEXT',
            'constraints': ['PRIMARY KEY'],
            'comment': 'UUID4 identifier'
        },
        'user_id': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': 'Owner id'
        },
        'score': {
            'type': 'INTEGER',
            'constraints': ['NOT NULL'],
            'comment': 'Score 0-100'
        },
        'answers': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': 'Answers as JSON'
        },
        'feedback': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': 'Generated feedback text'
        },
        'taken_at': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': 'When the test was taken'
        },
        'is_completed': {
            'type': 'INTEGER',
            'constraints': ['DEFAULT 0'],
            'comment': '1 once the test is finished'
        },
    },
    'table_constraints': [],
    'indexes': [
        {'name': 'idx_self_test_user_taken', 'columns': ['user_id', 'taken_at']},
    ],
    'timestamps': False
}


TABLE_CONFIGS = {
    'activity_type': ACTIVITY_TYPE_CONFIG,
    'activity_record': ACTIVITY_RECORD_CONFIG,
    'self_test': SELF_TEST_CONFIG,
}

# Tables that also carry an updated_at column
TABLES_WITH_UPDATED_AT = {'activity_type'}


def get_table_config(table_name: str) -> dict:
    """
    Return the configuration of one table

    Args:
        table_name: table name

    Returns:
        dict: table configuration

    Raises:
        ValueError: if the table is not configured
    """
    if table_name not in TABLE_CONFIGS:
        raise ValueError(f"No configuration for table '{table_name}'")
    return TABLE_CONFIGS[table_name]


def get_table_columns(table_name: str) -> list:
    """
    Return the column names of a table (timestamp columns excluded)
    """
    config = get_table_config(table_name)
    return list(config['columns'].keys())


def get_all_table_names() -> list:
    return list(TABLE_CONFIGS.keys())
