import os
import sys
import json
from hashlib import md5
from pprint import pprint
from coc7.data import get_strings
from coc7.files import char_replace, makedirs, write_character
from coc7.patterns import check_language
from coc7.sql import get_db_connection
from coc7.sql.items import CATALOG_SOURCES, fetch_item_by_name
from coc7.utils import set_path

CREATED_FOLDER = 'importer.created_folder'


def record_id(*parts):
    pre_id = ": ".join([str(p) for p in parts])
    return md5(str.encode(pre_id)).hexdigest()


class Host():
    """What the importer needs from the application it imports into.

    This base class localizes strings and reports diagnostics on stderr. It
    has no catalog, and anything that persists raises NotImplementedError.
    """

    def __init__(self, lang='en', debug=False):
        self.lang = check_language(lang)
        self.strings = get_strings(self.lang)
        self.debug_enabled = debug

    def localize(self, key):
        return self.strings.get(key, key)

    def find_catalog_item(self, item_type, name, search_order, combat=None):
        return None

    def create_container_if_absent(self, name):
        raise NotImplementedError("%s cannot create containers" % self)

    def create_record(self, data):
        raise NotImplementedError("%s cannot create records" % self)

    def update_record(self, record, updates):
        raise NotImplementedError("%s cannot update records" % self)

    def attach_sub_records(self, record, items):
        raise NotImplementedError("%s cannot attach items" % self)

    def info(self, message):
        sys.stderr.write("%s\n" % message)

    def warn(self, message):
        sys.stderr.write("WARNING: %s\n" % message)

    def debug(self, message, *args):
        if not self.debug_enabled:
            return
        sys.stderr.write("%s\n" % message)
        for arg in args:
            pprint(arg, stream=sys.stderr)

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self.lang)


class FileHost(Host):
    """Files characters as json under an output directory and looks items
    up in a sqlite catalog."""

    def __init__(self, output, lang='en', catalog=None, debug=False):
        super().__init__(lang, debug)
        self.output = output
        self.conn = None
        if catalog:
            self.conn = get_db_connection(catalog)
        self.paths = {}

    def find_catalog_item(self, item_type, name, search_order, combat=None):
        if not self.conn:
            return None
        for code in search_order:
            source = CATALOG_SOURCES.get(code)
            if not source:
                continue
            curs = self.conn.cursor()
            try:
                fetch_item_by_name(curs, source, item_type, name, combat)
                row = curs.fetchone()
            finally:
                curs.close()
            if row:
                return json.loads(row['item'])
        return None

    def create_container_if_absent(self, name):
        jsondir = os.path.abspath(self.output + "/" + char_replace(name))
        if not os.path.exists(jsondir):
            jsondir = makedirs(self.output, name)
            self.info(self.localize(CREATED_FOLDER))
        return {'name': name, 'path': jsondir}

    def create_record(self, data):
        record = {
            '_id': record_id(data['folder']['name'], data['type'], data['name']),
            'name': data['name'],
            'type': data['type'],
            'folder': data['folder']['name'],
            'data': data['data'],
            'items': []
        }
        self.paths[record['_id']] = data['folder']['path']
        filename = self._write(record)
        self.info("%s (%s): %s" % (record['type'], record['folder'], filename))
        return record

    def attach_sub_records(self, record, items):
        start = len(record['items'])
        for i, item in enumerate(items):
            item['_id'] = record_id(record['_id'], item['type'], item['name'], start + i)
            record['items'].append(item)
        self._write(record)
        return items

    def update_record(self, record, updates):
        for path, value in updates.items():
            set_path(record, path, value)
        self._write(record)
        return record

    def _write(self, record):
        return write_character(self.paths[record['_id']], record)
