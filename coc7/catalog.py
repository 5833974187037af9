import os
import sys
import json
from coc7.sql import get_db_connection
from coc7.sql.items import truncate_items, insert_item


def read_catalog_file(filename):
    with open(filename, encoding='utf-8') as fp:
        data = json.load(fp)
    if isinstance(data, dict):
        data = [data]
    for item in data:
        assert 'name' in item and 'type' in item, "%s: %s" % (filename, item)
    return data


def load_catalog(db, args, source):
    """Replace the items of one catalog source with those in the json files"""
    count = 0
    with get_db_connection(db) as conn:
        curs = conn.cursor()
        truncate_items(curs, source)
        for filename in args:
            sys.stderr.write("%s\n" % os.path.basename(filename))
            for item in read_catalog_file(filename):
                insert_item(curs, source, item)
                count += 1
    return count
