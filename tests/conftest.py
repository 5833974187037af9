import pytest
from coc7.extract import ParseContext
from coc7.host import Host
from coc7.patterns import get_patterns
from coc7.utils import set_path


class RecordingHost(Host):
    """Keeps everything in memory and remembers what it was asked."""

    def __init__(self, lang='en', catalog=None):
        super().__init__(lang)
        self.catalog = catalog or {}
        self.lookups = []
        self.warnings = []
        self.containers = []
        self.records = []

    def find_catalog_item(self, item_type, name, search_order, combat=None):
        self.lookups.append((item_type, name, combat))
        return self.catalog.get((item_type, name.lower()))

    def warn(self, message):
        self.warnings.append(message)

    def create_container_if_absent(self, name):
        if name not in self.containers:
            self.containers.append(name)
        return {'name': name}

    def create_record(self, data):
        record = dict(data)
        record['_id'] = 'record-%d' % len(self.records)
        record['items'] = []
        self.records.append(record)
        return record

    def attach_sub_records(self, record, items):
        for item in items:
            item['_id'] = 'item-%d' % len(record['items'])
            record['items'].append(item)
        return items

    def update_record(self, record, updates):
        for path, value in updates.items():
            set_path(record, path, value)
        return record


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def make_ctx(host):
    def _make_ctx(text, lang='en'):
        return ParseContext(text, get_patterns(lang), host)
    return _make_ctx
