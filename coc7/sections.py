from coc7.extract import check
from coc7.combat import parse_combat
from coc7.skills import parse_skills, parse_languages, parse_spells

SECTION_PARSERS = [
    ('section_combat', parse_combat),
    ('section_skills', parse_skills),
    ('section_languages', parse_languages),
    ('section_spells', parse_spells),
]


def guess_combat_pass(ctx):
    """Without an explicit combat header, insert one where the first weapon
    line seems to start so the split still yields a combat section."""
    if ctx.patterns.lookup('section_combat').search(ctx.text):
        return
    found = check(ctx, 'guess_start_combat', save_keys=False,
                  remove_from_text=False)
    if found:
        index = found['index']
        ctx.text = ''.join([
            ctx.text[:index],
            ctx.patterns.keys['new_combat_header'],
            ctx.text[index:]])


def section_pass(ctx):
    ctx.text = '\n' + ctx.text
    guess_combat_pass(ctx)
    parts = ctx.patterns.lookup('sections').split(ctx.text)
    # split() keeps the captured headers: body, header, body, header, body...
    for i in range(1, len(parts), 2):
        header = parts[i]
        body = parts[i + 1]
        for key, parser in SECTION_PARSERS:
            if ctx.patterns.lookup(key).search(header):
                ctx.text = ('\n' + ctx.text + '\n').replace(header, '\n', 1).strip()
                parser(ctx, body)
                break
    ctx.text = ctx.text.strip()
