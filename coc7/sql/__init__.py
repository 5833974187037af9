import os
import sqlite3
from coc7.sql.items import create_items_table, create_items_index

CATALOG_DIR = "~/.coc7"


def get_db_path(db_name, create=True):
    """Path of db_name under the catalog directory.

    With create False nothing is made on disk and None is returned when the
    database does not exist yet."""
    path = os.path.expanduser(CATALOG_DIR)
    filename = os.path.abspath(os.path.join(path, db_name))
    if create:
        os.makedirs(path, exist_ok=True)
    elif not os.path.exists(filename):
        return None
    return filename


def check_db_version(curs):
    curs.execute("SELECT MAX(version) FROM database_version")
    row = curs.fetchone()
    return row[0]


def _catalog_version_table(curs):
    sql = '\n'.join([
        "CREATE TABLE IF NOT EXISTS database_version (",
        "  id INTEGER PRIMARY KEY,",
        "  version INTEGER",
        ")"])
    curs.execute(sql)


def _catalog_items(curs):
    create_items_table(curs)
    create_items_index(curs)


# Applied in order; a database at version n has run the first n steps
MIGRATIONS = [
    _catalog_version_table,
    _catalog_items,
]


def migrate_catalog(conn):
    curs = conn.cursor()
    try:
        _catalog_version_table(curs)
        ver = int(check_db_version(curs) or 0)
        for step, migration in enumerate(MIGRATIONS[ver:], ver + 1):
            migration(curs)
            curs.execute(
                "INSERT INTO database_version (version) VALUES (?)", [step])
            conn.commit()
            ver = step
    finally:
        curs.close()
    return ver


def dict_factory(cursor, row):
    return dict([(col[0], row[idx])
                 for idx, col in enumerate(cursor.description)])


def get_db_connection(db):
    conn = sqlite3.connect(os.path.expanduser(db))
    migrate_catalog(conn)
    conn.row_factory = dict_factory
    return conn
