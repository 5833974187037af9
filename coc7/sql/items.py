import json

# Search order codes and the catalog source each one selects
CATALOG_SOURCES = {
    'i': 'directory',
    'w': 'world',
    'm': 'module',
    's': 'system',
}


def create_items_table(curs):
    sql = '\n'.join([
        "CREATE TABLE items (",
        "  item_id INTEGER PRIMARY KEY,",
        "  source TEXT NOT NULL,",
        "  type TEXT NOT NULL,",
        "  name TEXT NOT NULL,",
        "  combat INTEGER,",
        "  item TEXT",
        ")"])
    curs.execute(sql)


def create_items_index(curs):
    sql = '\n'.join([
        "CREATE INDEX items_source_type_name",
        " ON items (source, type, name)"])
    curs.execute(sql)


def truncate_items(curs, source=None):
    if source:
        curs.execute("DELETE FROM items WHERE source = ?", [source])
    else:
        curs.execute("DELETE FROM items")


def insert_item(curs, source, item):
    combat = item.get('data', {}).get('properties', {}).get('combat')
    if combat is not None:
        combat = int(bool(combat))
    values = [source, item['type'], item['name'].lower(), combat,
              json.dumps(item)]
    sql = '\n'.join([
        "INSERT INTO items",
        " (source, type, name, combat, item)",
        " VALUES",
        " (?, ?, ?, ?, ?)"])
    curs.execute(sql, values)
    return curs.lastrowid


def fetch_item_by_name(curs, source, item_type, name, combat=None):
    values = [source, item_type, name.lower()]
    sql = [
        "SELECT i.*",
        " FROM items i",
        " WHERE i.source = ?",
        "  AND i.type = ?",
        "  AND i.name = ?"]
    if combat is not None:
        sql.append("  AND i.combat = ?")
        values.append(int(bool(combat)))
    sql.append(" ORDER BY i.item_id")
    curs.execute('\n'.join(sql), values)
