import re
from coc7.extract import check, consume, MAX_LOOPS
from coc7.patterns import WEAPON_CATEGORIES, translate_roll
from coc7.utils import clean_string

SHOTGUN_RANGES = [10, 20, 50]


def weapon_categories(ctx, name):
    """Weapon category keys whose keyword list matches the weapon name"""
    return [key for key in WEAPON_CATEGORIES if check(
        ctx, key, text=name, remove_from_text=False, save_keys=False)]


def strip_damage_bonus(ctx, damage):
    keys = ctx.patterns.keys
    db = re.escape(re.sub(r'^[-+]', '', str(ctx.parsed.get('db', '0'))))
    half = re.compile(
        r'\s*[+-]?\s*(?:' + keys['halfdb'] + r')\s*(?:' + keys['fulldb'] +
        r')?[-+]?\s*(?:' + db + r')?', re.IGNORECASE)
    full = re.compile(
        r'\s*[+-]?\s*(?:' + keys['fulldb'] + r')\s*[-+]?\s*(?:' + db + r')?',
        re.IGNORECASE)
    half_db = False
    full_db = False
    while True:
        m = half.search(damage)
        if m:
            half_db = True
        else:
            m = full.search(damage)
            if not m:
                break
            full_db = True
        damage = damage[:m.start()] + damage[m.end():]
    return damage.strip(), half_db, full_db


def build_weapon(ctx, groups, last_percent):
    name = clean_string(groups.get('name') or '')
    damage = translate_roll(ctx.patterns, clean_string(groups.get('damage') or ''))
    ranged = len(weapon_categories(ctx, name)) > 0
    if groups.get('percentage') is not None:
        percentage = int(groups['percentage'])
        shared = False
    else:
        percentage = last_percent
        shared = True
    damage, half_db, full_db = strip_damage_bonus(ctx, damage)
    damages = damage.split('/')
    shotgun = len(damages) == 3
    bands = {}
    for i, band in enumerate(['normal', 'long', 'extreme']):
        if shotgun:
            bands[band] = {'value': SHOTGUN_RANGES[i], 'damage': damages[i].strip()}
        elif i == 0:
            bands[band] = {'value': 0, 'damage': damage}
        else:
            bands[band] = {'value': 0, 'damage': ''}
    weapon = {
        'name': name,
        'skill': {'percentage': percentage, 'shared': shared},
        'damage': damage,
        'range': bands,
        'properties': {
            'shotgun': shotgun,
            'ranged': ranged or shotgun,
            'melee': not (ranged or shotgun),
            'half_db': half_db,
            'full_db': full_db
        }
    }
    return weapon


def parse_combat(ctx, text):
    if text.strip() == '':
        return
    ctx.host.debug('combat text', text)
    last_percent = None
    max_loops = MAX_LOOPS
    while True:
        max_loops -= 1
        text = text.strip()
        weapon = None
        dodge = check(ctx, 'weapon_dodge', save_keys=False, text=text)
        if dodge:
            text = consume(text, dodge)
            ctx.parsed.setdefault('skills', []).append({
                'name': clean_string(dodge['groups']['name']),
                'value': int(dodge['groups']['percentage']),
                'push': False
            })
        else:
            # Until one weapon states a percentage, later ones cannot share it
            required = 'percentage' if last_percent is None else None
            weapon = check(ctx, 'weapon', save_keys=False, text=text,
                           required_group=required)
            if weapon:
                text = consume(text, weapon)
                attack = build_weapon(ctx, weapon['groups'], last_percent)
                last_percent = attack['skill']['percentage']
                ctx.parsed.setdefault('attacks', []).append(attack)
            else:
                line = re.match(r'^(.+)\n', text)
                if line:
                    text = text[line.end():]
                elif re.match(r'^[^\n]+$', text):
                    text = ''
        if max_loops <= 0 or not (weapon or dodge or text):
            break
    if max_loops <= 0:
        ctx.host.warn("Unexpected weapons text, please raise a bug report "
                      "with the text you are attempting to import")
        ctx.host.debug('Unexpected weapons:', text)
