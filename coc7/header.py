import re
from coc7.extract import check, remove_first, AS_NUMBER
from coc7.patterns import HEADER_FIELDS

UNNAMED_CHARACTER = 'importer.unnamed_character'


def find_header_end(ctx):
    """Earliest offset of any characteristic, SAN, HP or MP in the buffer.

    The buffer is left untouched. None when nothing matched."""
    indexes = []
    for key in HEADER_FIELDS:
        found = check(ctx, key, remove_from_text=False, save_keys=False)
        if found:
            indexes.append(found['index'])
    if len(indexes) == 0:
        return None
    return min(indexes)


def header_pass(ctx):
    end = find_header_end(ctx)
    if not end:
        ctx.parsed['name'] = ctx.host.localize(UNNAMED_CHARACTER)
        return
    header = ctx.text[:end]
    found = check(ctx, 'name', text=header)
    if found:
        header = header.replace(found['source'], '\n', 1)
    else:
        ctx.parsed['name'] = ctx.host.localize(UNNAMED_CHARACTER)
    found = check(ctx, 'age', text=header, value_type=AS_NUMBER)
    if found:
        header = header.replace(found['source'], '\n', 1)
    if not check(ctx, 'occupation', text=header) and header.strip() != '':
        _occupation_from_header(ctx, header)
    _split_age_from_occupation(ctx)


def _occupation_from_header(ctx, header):
    occupation = header
    if '.' in header:
        # Only the first sentence of a loose header is the occupation
        occupation = header[:header.index('.') + 1]
    ctx.text = remove_first(ctx.text, occupation)
    occupation = re.sub(r'[\n\r]+', ' ', occupation).strip()
    occupation = occupation.strip(' ,.')
    if occupation:
        ctx.parsed['occupation'] = occupation


def _split_age_from_occupation(ctx):
    if 'occupation' not in ctx.parsed or 'age' in ctx.parsed:
        return
    m = re.match(r'^(?P<age>\d+)\s*,(?P<occupation>.+)$',
                 ctx.parsed['occupation'])
    if m:
        ctx.parsed['age'] = int(m.group('age'))
        ctx.parsed['occupation'] = m.group('occupation').strip()
