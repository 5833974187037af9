from coc7.assemble import actor_data, items_data, weapon_skill
from coc7.assemble import auto_attribs_pass, create_entity, folder_name
from coc7.assemble import empty_skill
from coc7.combat import parse_combat
from coc7.host import Host
from coc7.patterns import get_patterns

HANDGUN = {
    'name': 'Handgun',
    'type': 'skill',
    'data': {'value': 20, 'properties': {'combat': True, 'firearm': True}}
}


def attacks(make_ctx, text):
    ctx = make_ctx("")
    parse_combat(ctx, text)
    return ctx.parsed['attacks']


class TestActorData:
    def test_shapes(self):
        data = actor_data({
            'str': 50, 'san': 45, 'build': '-1', 'armor': '0', 'db': '-1',
            'age': 34, 'occupation': 'Mechanic', 'san_loss': '1/1D6',
            'attacks_per_round': '2', 'gmnotes': '<p>Notes</p>'})
        assert data['characteristics'] == {'str': {'value': 50}}
        assert data['attribs'] == {
            'san': {'value': 45}, 'build': {'value': -1},
            'armor': {'value': 0}, 'db': {'value': '-1'}}
        assert data['infos'] == {'age': 34, 'occupation': 'Mechanic'}
        assert data['special'] == {
            'san_loss': {'check_passed': '1', 'check_failed': '1D6'},
            'attacks_per_round': 2}
        assert data['description'] == {'keeper': '<p>Notes</p>'}


class TestWeaponSkill:
    def test_catalog_skill_cloned(self, make_ctx, host):
        host.catalog[('skill', 'handgun')] = HANDGUN
        attack = attacks(make_ctx, ".38 Revolver 40%, damage 1D10")[0]
        skill = weapon_skill(attack, get_patterns('en'), host, 'iwms')
        assert skill['name'] == 'Handgun'
        assert skill['data']['value'] == 40
        assert HANDGUN['data']['value'] == 20

    def test_rifle_fallbacks(self, make_ctx, host):
        attack = attacks(make_ctx, "Hunting Rifle 55%")[0]
        skill = weapon_skill(attack, get_patterns('en'), host, 'iwms')
        assert host.lookups == [('skill', 'Rifle/Shotgun', True),
                                ('skill', 'Rifle', True),
                                ('skill', 'Shotgun', True)]
        assert skill['name'] == 'Hunting Rifle'
        assert skill['data']['specialization'] == 'Firearms'
        assert skill['data']['properties']['firearm'] is True
        assert skill['data']['value'] == 55

    def test_melee_made_up(self, make_ctx, host):
        attack = attacks(make_ctx, "Brawl 50%")[0]
        skill = weapon_skill(attack, get_patterns('en'), host, 'iwms')
        assert host.lookups == []
        assert skill['data']['specialization'] == 'Fighting'
        assert skill['data']['properties']['fighting'] is True


class TestItemsData:
    def test_shared_weapon_skill(self, make_ctx, host):
        parsed = {'attacks': attacks(make_ctx, "Rifle 45%, Pistol, Knife 30%")}
        items, links = items_data(parsed, get_patterns('en'), host, 'iwms')
        assert [(i['type'], i['name']) for i in items] == [
            ('skill', 'Rifle'), ('weapon', 'Rifle'), ('weapon', 'Pistol'),
            ('skill', 'Knife'), ('weapon', 'Knife')]
        assert links == [(0, 1), (0, 2), (3, 4)]
        assert items[2]['data']['properties']['rngd'] is True

    def test_catalog_skills(self, host):
        host.catalog[('skill', 'spot hidden')] = {
            'name': 'Spot Hidden', 'type': 'skill',
            'data': {'base': 25, 'properties': {'push': True}}}
        parsed = {
            'skills': [{'name': 'spot hidden', 'value': 60},
                       {'name': 'Dodge', 'value': 30, 'push': False}],
            'languages': [{'name': 'Latin', 'value': 20}],
            'spells': ['Contact Ghoul']}
        items, links = items_data(parsed, get_patterns('en'), host, 'iwms')
        assert links == []
        assert items[0]['name'] == 'Spot Hidden'
        assert items[0]['data']['base'] == 60
        assert items[1] == empty_skill('Dodge', 30, push=False)
        assert items[2]['name'] == 'Language (Latin)'
        assert items[2]['data']['skillName'] == 'Latin'
        assert items[3] == {'name': 'Contact Ghoul', 'type': 'spell',
                            'data': {'notes': ''}}


class TestAutoAttribsPass:
    def test_matching_values_stay_automatic(self):
        parsed = {'str': 50, 'con': 50, 'siz': 50, 'dex': 50, 'pow': 50,
                  'hp': 10, 'mp': 10, 'mov': 8, 'build': '0', 'db': '+0'}
        actor = auto_attribs_pass(actor_data(parsed), parsed)
        for key in ['hp', 'mp', 'mov', 'build', 'db']:
            assert actor['attribs'][key]['auto'] is True, key

    def test_explicit_values_win(self):
        parsed = {'str': 50, 'con': 50, 'siz': 50, 'dex': 50, 'pow': 50,
                  'hp': 15, 'db': '+1D4'}
        actor = auto_attribs_pass(actor_data(parsed), parsed)
        assert actor['attribs']['hp'] == {'value': 15, 'auto': False, 'max': 15}
        assert actor['attribs']['db'] == {'value': '1D4', 'auto': False}

    def test_not_derivable(self):
        parsed = {'hp': 10}
        actor = auto_attribs_pass(actor_data(parsed), parsed)
        assert actor['attribs']['hp']['auto'] is False


class TestCreateEntity:
    def test_folder_fallback(self, host):
        assert folder_name(host) == 'Imported characters'

    def test_npc(self, host):
        character = {'name': 'Bob', 'actor': {'attribs': {}}, 'items': []}
        record = create_entity(character, [], 'npc', host)
        assert record['type'] == 'npc'
        assert record['folder'] == {'name': 'Imported characters'}
        assert host.records == [record]


class TestHostBase:
    def test_localize_falls_back_to_key(self):
        assert Host().localize('importer.no_such_string') == \
            'importer.no_such_string'

    def test_no_catalog(self):
        assert Host().find_catalog_item('skill', 'Dodge', 'iwms') is None
