import sqlite3

import pytest


@pytest.fixture
def hundred_rows():
    """In-memory table with keys 1..100 named name_0..name_99."""
    connection = sqlite3.connect(":memory:")
    connection.execute("CREATE TABLE dialect (entity_id INTEGER PRIMARY KEY, str TEXT UNIQUE)")
    connection.executemany(
        "INSERT INTO dialect (entity_id, str) VALUES (?, ?)",
        [(i + 1, f"name_{i}") for i in range(100)],
    )
    connection.commit()
    yield connection
    connection.close()
