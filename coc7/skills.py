import re
from coc7.extract import check, consume, remove_first, MAX_LOOPS
from coc7.utils import clean_string, split_maintain_parens


def _first_paragraph(text):
    # Anything after a sentence ending line break is prose, not a list
    breaks = re.split(r'\.\r?\n', text)
    if len(breaks) > 1:
        return breaks[0]
    return text


def parse_skills(ctx, text, key='skills'):
    if text.strip() == '':
        return
    text = _first_paragraph(text)
    max_loops = MAX_LOOPS
    while True:
        max_loops -= 1
        text = text.strip()
        skill = check(ctx, 'skill', save_keys=False, text=text)
        if skill:
            text = consume(text, skill)
            ctx.parsed.setdefault(key, []).append({
                'name': clean_string(skill['groups']['name']),
                'value': int(skill['groups']['percentage'])
            })
        if max_loops <= 0 or not skill:
            break
    if max_loops <= 0:
        ctx.host.warn("Unexpected skills text, please raise a bug report "
                      "with the text you are attempting to import")
        ctx.host.debug('Unexpected skills:', text)


def parse_languages(ctx, text):
    parse_skills(ctx, text, 'languages')


def parse_spells(ctx, text):
    if text.strip() == '':
        return
    text = _first_paragraph(text)
    spells = split_maintain_parens(re.sub(r'[\n\r]+', ' ', text), ',')
    ctx.text = remove_first(ctx.text, text)
    for spell in spells:
        spell = clean_string(spell)
        if spell:
            ctx.parsed.setdefault('spells', []).append(spell)
