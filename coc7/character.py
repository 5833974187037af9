import os
import sys
import json
from coc7.assemble import actor_data, items_data, auto_attribs_pass
from coc7.assemble import create_entity
from coc7.attributes import attribute_pass
from coc7.convert import should_convert, convert_7e, CONVERT_GUESS
from coc7.extract import ParseContext
from coc7.header import header_pass
from coc7.host import Host, FileHost
from coc7.patterns import get_patterns
from coc7.schema import validate_against_schema
from coc7.sections import section_pass
from coc7.sql import get_db_path
from coc7.utils import normalize_text, to_html

DEFAULT_SEARCH_ORDER = 'iwms'


def run_passes(ctx):
    header_pass(ctx)
    attribute_pass(ctx)
    section_pass(ctx)
    # Whatever is left over goes to the keeper notes
    ctx.parsed['gmnotes'] = to_html(ctx.text)
    return ctx.parsed


def parse_character(text, patterns, host):
    ctx = ParseContext(normalize_text(text), patterns, host)
    return run_passes(ctx)


def import_character(text, lang='en', entity='npc', convert=CONVERT_GUESS,
                     source=DEFAULT_SEARCH_ORDER, host=None, test_mode=False,
                     skip_schema=False):
    """Parse a free form character description and file it with the host.

    In test mode the assembled {name, actor, items} is returned without
    being persisted."""
    if host is None:
        host = Host(lang)
    patterns = get_patterns(lang)
    host.debug('import_character:', {
        'lang': patterns.lang, 'entity': entity, 'convert': convert,
        'source': source})
    parsed = parse_character(text, patterns, host)
    host.debug('parse_character:', parsed)
    if should_convert(parsed, convert):
        parsed = convert_7e(parsed)
    actor = auto_attribs_pass(actor_data(parsed), parsed)
    items, links = items_data(parsed, patterns, host, source)
    character = {
        'name': parsed['name'],
        'actor': actor,
        'items': items
    }
    if not skip_schema:
        validate_against_schema(character, "character.schema.json")
    if test_mode:
        return character
    return create_entity(character, links, entity, host)


def import_file(filename, options):
    basename = os.path.basename(filename)
    if not options.stdout:
        sys.stderr.write("%s\n" % basename)
    with open(filename, encoding='utf-8') as fp:
        text = fp.read()
    catalog = options.catalog or get_db_path("catalog.db", create=False)
    host = FileHost(options.output, lang=options.lang,
                    catalog=catalog, debug=options.debug)
    character = import_character(
        text, lang=options.lang, entity=options.entity,
        convert=options.convert, source=options.items, host=host,
        test_mode=options.dryrun, skip_schema=options.skip_schema)
    if options.stdout:
        print(json.dumps(character, indent=2, ensure_ascii=False))
    return character
