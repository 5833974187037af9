from coc7.combat import parse_combat, strip_damage_bonus, weapon_categories

COMBAT = "\n".join([
    "",
    "Brawl 50%, damage 1D3+DB",
    ".38 Revolver 40%, damage 1D10",
    "Dodge 25%"])


class TestParseCombat:
    def test_weapons_and_dodge(self, make_ctx):
        ctx = make_ctx("Combat" + COMBAT)
        parse_combat(ctx, COMBAT)
        brawl, revolver = ctx.parsed['attacks']
        assert brawl['name'] == 'Brawl'
        assert brawl['skill'] == {'percentage': 50, 'shared': False}
        assert brawl['damage'] == '1D3'
        assert brawl['properties']['full_db'] is True
        assert brawl['properties']['melee'] is True
        assert revolver['name'] == '.38 Revolver'
        assert revolver['damage'] == '1D10'
        assert revolver['properties']['ranged'] is True
        assert revolver['properties']['melee'] is False
        assert ctx.parsed['skills'] == [
            {'name': 'Dodge', 'value': 25, 'push': False}]
        assert ctx.text.strip() == "Combat"

    def test_percentage_carries_over(self, make_ctx):
        ctx = make_ctx("")
        parse_combat(ctx, "Rifle 45%, Pistol, Knife 30%")
        attacks = ctx.parsed['attacks']
        assert [a['name'] for a in attacks] == ['Rifle', 'Pistol', 'Knife']
        assert [a['skill']['percentage'] for a in attacks] == [45, 45, 30]
        assert [a['skill']['shared'] for a in attacks] == [False, True, False]
        assert attacks[1]['properties']['ranged'] is True
        assert attacks[2]['properties']['melee'] is True

    def test_shotgun_bands(self, make_ctx):
        ctx = make_ctx("")
        parse_combat(ctx, "12-gauge Shotgun 50%, damage 4D6/2D6/1D6")
        shotgun = ctx.parsed['attacks'][0]
        assert shotgun['properties']['shotgun'] is True
        assert shotgun['properties']['ranged'] is True
        assert shotgun['range'] == {
            'normal': {'value': 10, 'damage': '4D6'},
            'long': {'value': 20, 'damage': '2D6'},
            'extreme': {'value': 50, 'damage': '1D6'}}

    def test_single_band(self, make_ctx):
        ctx = make_ctx("")
        parse_combat(ctx, "Knife 30%, damage 1D4")
        knife = ctx.parsed['attacks'][0]
        assert knife['range'] == {
            'normal': {'value': 0, 'damage': '1D4'},
            'long': {'value': 0, 'damage': ''},
            'extreme': {'value': 0, 'damage': ''}}

    def test_german_damage_dice(self, make_ctx):
        ctx = make_ctx("", lang='de')
        parse_combat(ctx, "Messer 30%, Schaden 1W4")
        assert ctx.parsed['attacks'][0]['damage'] == '1D4'

    def test_unparseable_lines_skipped(self, make_ctx):
        ctx = make_ctx("")
        parse_combat(ctx, "Nothing to see\nKnife 30%")
        assert [a['name'] for a in ctx.parsed['attacks']] == ['Knife']

    def test_loop_budget(self, make_ctx, host):
        text = "\n".join(["Knife %s 30%%" % ("a" * (i + 1))
                          for i in range(45)])
        ctx = make_ctx("")
        parse_combat(ctx, text)
        assert len(ctx.parsed["attacks"]) == 40
        assert len(host.warnings) == 1

    def test_empty(self, make_ctx):
        ctx = make_ctx("")
        parse_combat(ctx, "  ")
        assert ctx.parsed == {}


class TestStripDamageBonus:
    def test_half(self, make_ctx):
        ctx = make_ctx("")
        assert strip_damage_bonus(ctx, "1D4+½DB") == ('1D4', True, False)

    def test_full_with_value(self, make_ctx):
        ctx = make_ctx("")
        ctx.parsed['db'] = '+1D4'
        assert strip_damage_bonus(ctx, "1D6+DB 1D4") == ('1D6', False, True)

    def test_none(self, make_ctx):
        ctx = make_ctx("")
        assert strip_damage_bonus(ctx, "1D8") == ('1D8', False, False)


class TestWeaponCategories:
    def test_categories(self, make_ctx):
        ctx = make_ctx("")
        assert weapon_categories(ctx, "Thompson") == ['smb']
        assert weapon_categories(ctx, "Colt .45 Pistol") == ['handgun']
        assert weapon_categories(ctx, "Brawl") == []
