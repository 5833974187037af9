import copy
from coc7.derived import derived_hp, derived_mp, derived_mov, derived_build_db
from coc7.patterns import CHARACTERISTICS

FOLDER = 'importer.folder'
DEFAULT_FOLDER = 'Imported characters'
FIREARM_SPECIALIZATION = 'importer.firearm_specialization'
FIGHTING_SPECIALIZATION = 'importer.fighting_specialization'
LANGUAGE_SPECIALIZATION = 'importer.language_specialization'

NUMERIC_ATTRIBS = ['san', 'mov', 'build', 'armor', 'lck', 'hp', 'mp']

# Catalog skill names tried, in order, for each weapon category
CATEGORY_SKILLS = [
    ('handgun', ['Handgun']),
    ('rifle', ['Rifle/Shotgun', 'Rifle', 'Shotgun']),
    ('smb', ['Submachine Gun']),
    ('machine_gun', ['Machine Gun']),
    ('launched', ['Launch']),
]


def empty_skill(name, value, specialization=None, push=True):
    skill_name = name
    if specialization:
        name = "%s (%s)" % (specialization, skill_name)
    return {
        'name': name,
        'type': 'skill',
        'data': {
            'skillName': skill_name,
            'specialization': specialization or '',
            'base': value,
            'value': value,
            'properties': {
                'special': bool(specialization),
                'push': push,
                'combat': False,
                'fighting': False,
                'firearm': False
            }
        }
    }


def empty_spell(name):
    return {
        'name': name,
        'type': 'spell',
        'data': {'notes': ''}
    }


def basic_weapon_skill_data(firearms, host):
    if firearms:
        specialization = host.localize(FIREARM_SPECIALIZATION)
    else:
        specialization = host.localize(FIGHTING_SPECIALIZATION)
    return {
        'specialization': specialization,
        'properties': {
            'special': True,
            'push': True,
            'fighting': not firearms,
            'firearm': firearms,
            'combat': True
        }
    }


def _category_skill(attack, patterns, host, search_order):
    for key, names in CATEGORY_SKILLS:
        if not patterns.lookup(key).search(attack['name']):
            continue
        for name in names:
            skill = host.find_catalog_item(
                'skill', name, search_order, combat=True)
            if skill:
                return skill
        # Only the first matching category is consulted
        return None
    return None


def weapon_skill(attack, patterns, host, search_order):
    """Skill item for a weapon that states its own percentage.

    A catalog skill for the weapon's category is cloned when one exists,
    otherwise a skill named after the weapon is made up."""
    percentage = attack['skill']['percentage']
    skill = _category_skill(attack, patterns, host, search_order)
    if skill:
        skill = copy.deepcopy(skill)
        skill.setdefault('data', {})['value'] = percentage
        host.debug("%s uses %s skill" % (attack['name'], skill['name']))
        return skill
    data = basic_weapon_skill_data(attack['properties']['ranged'], host)
    data['skillName'] = attack['name']
    data['base'] = percentage
    data['value'] = percentage
    skill = {'name': attack['name'], 'type': 'skill', 'data': data}
    host.debug("Weapon skill not found for %s, creating a new one"
               % attack['name'], skill)
    return skill


def weapon_item(attack):
    properties = attack['properties']
    return {
        'name': attack['name'],
        'type': 'weapon',
        'data': {
            'skill': {'main': {'id': None, 'name': ''}},
            'range': copy.deepcopy(attack['range']),
            'properties': {
                'shotgun': properties['shotgun'],
                'rngd': properties['ranged'],
                'melee': properties['melee'],
                'ahdb': properties['half_db'],
                'addb': properties['full_db']
            }
        }
    }


def actor_data(parsed):
    data = {
        'characteristics': {},
        'attribs': {},
        'infos': {},
        'special': {},
        'description': {'keeper': ''},
        'flags': {'locked': False, 'display_formula': False}
    }
    for key in CHARACTERISTICS:
        if key in parsed:
            data['characteristics'][key] = {'value': parsed[key]}
    for key in NUMERIC_ATTRIBS:
        if key in parsed:
            data['attribs'][key] = {'value': int(parsed[key])}
    if 'db' in parsed:
        data['attribs']['db'] = {'value': parsed['db']}
    for key in ['age', 'occupation']:
        if key in parsed:
            data['infos'][key] = parsed[key]
    if 'san_loss' in parsed:
        passed, _, failed = parsed['san_loss'].partition('/')
        data['special']['san_loss'] = {
            'check_passed': passed.strip(),
            'check_failed': failed.strip()
        }
    if 'attacks_per_round' in parsed:
        data['special']['attacks_per_round'] = int(parsed['attacks_per_round'])
    data['description']['keeper'] = parsed.get('gmnotes', '')
    return data


def items_data(parsed, patterns, host, search_order):
    """Items for the parsed record, plus (skill index, weapon index) pairs
    linking each weapon to the skill it uses."""
    items = []
    links = []
    skill_index = None
    for attack in parsed.get('attacks', []):
        if not attack['skill']['shared'] or skill_index is None:
            items.append(weapon_skill(attack, patterns, host, search_order))
            skill_index = len(items) - 1
        items.append(weapon_item(attack))
        links.append((skill_index, len(items) - 1))
    for skill in parsed.get('skills', []):
        existing = host.find_catalog_item('skill', skill['name'], search_order)
        if existing:
            cloned = copy.deepcopy(existing)
            cloned.setdefault('data', {})['base'] = skill['value']
            if 'push' in skill:
                cloned['data'].setdefault('properties', {})['push'] = skill['push']
            items.append(cloned)
        else:
            items.append(empty_skill(
                skill['name'], skill['value'], push=skill.get('push', True)))
    for language in parsed.get('languages', []):
        existing = host.find_catalog_item('skill', language['name'], search_order)
        if existing:
            cloned = copy.deepcopy(existing)
            cloned.setdefault('data', {})['base'] = language['value']
            items.append(cloned)
        else:
            items.append(empty_skill(
                language['name'], language['value'],
                specialization=host.localize(LANGUAGE_SPECIALIZATION)))
    for name in parsed.get('spells', []):
        existing = host.find_catalog_item('spell', name, search_order)
        if existing:
            cloned = copy.deepcopy(existing)
            cloned.setdefault('data', {})
            items.append(cloned)
        else:
            items.append(empty_spell(name))
    return items, links


def _override_attrib(attribs, key, value, derived):
    attrib = attribs[key]
    if value == derived:
        attrib['auto'] = True
        return
    attrib['auto'] = False
    attrib['value'] = value
    if key == 'build':
        attrib['current'] = value
    else:
        attrib['max'] = value


def auto_attribs_pass(actor, parsed):
    """Attributes that disagree with what the characteristics derive keep
    their stated value and stop being computed automatically."""
    attribs = actor['attribs']
    build, db = derived_build_db(parsed)
    derived = [
        ('hp', derived_hp(parsed)),
        ('mp', derived_mp(parsed)),
        ('mov', derived_mov(parsed)),
    ]
    for key, value in derived:
        if key in attribs:
            _override_attrib(
                attribs, key, max(0, int(attribs[key]['value'])), value)
    if 'build' in attribs:
        _override_attrib(attribs, 'build', int(attribs['build']['value']), build)
    if 'db' in attribs:
        value = str(attribs['db']['value']).lstrip('+ ')
        if db is not None and value.upper() == db.upper():
            attribs['db']['auto'] = True
        else:
            attribs['db']['auto'] = False
            attribs['db']['value'] = value
    return actor


def folder_name(host):
    name = host.localize(FOLDER)
    if name == FOLDER:
        name = DEFAULT_FOLDER
    return name


def create_entity(character, links, entity_type, host):
    folder = host.create_container_if_absent(folder_name(host))
    if entity_type != 'npc':
        entity_type = 'creature'
    record = host.create_record({
        'name': character['name'],
        'type': entity_type,
        'folder': folder,
        'data': character['actor']
    })
    items = host.attach_sub_records(record, copy.deepcopy(character['items']))
    updates = {}
    for skill_index, weapon_index in links:
        skill = items[skill_index]
        updates['items.%d.data.skill.main.id' % weapon_index] = skill.get('_id')
        updates['items.%d.data.skill.main.name' % weapon_index] = skill['name']
    if len(updates) > 0:
        host.debug('updates:', updates)
        host.update_record(record, updates)
    return record
