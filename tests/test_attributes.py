from coc7.attributes import attribute_pass, characteristics_pass

FULL = "\n".join([
    "STR 50 CON 60 SIZ 70 DEX 55 APP 40 INT 80 POW 65 EDU 75",
    "SAN 65 HP 13 MP 13 DB +1D4 Build 1 Move 8 Luck 45 Armor none",
    "Sanity loss 1/1D6",
    "Attacks per round 2"])


class TestCharacteristicsPass:
    def test_numbers(self, make_ctx):
        ctx = make_ctx("STR 50 CON 60 SAN 45 HP 12 MP 9")
        characteristics_pass(ctx)
        assert ctx.parsed == {
            'str': 50, 'con': 60, 'san': 45, 'hp': 12, 'mp': 9}
        assert ctx.text == ""


class TestAttributePass:
    def test_everything_consumed(self, make_ctx):
        ctx = make_ctx(FULL)
        attribute_pass(ctx)
        assert ctx.text == ""
        parsed = ctx.parsed
        assert parsed['str'] == 50
        assert parsed['edu'] == 75
        assert parsed['san'] == 65
        assert parsed['db'] == '+1D4'
        assert parsed['build'] == '1'
        assert parsed['armor'] == '0'
        assert parsed['mov'] == 8
        assert parsed['lck'] == 45
        assert parsed['san_loss'] == '1/1D6'
        assert parsed['attacks_per_round'] == '2'

    def test_defaults(self, make_ctx):
        ctx = make_ctx("STR 50")
        attribute_pass(ctx)
        assert ctx.parsed['db'] == '0'
        assert ctx.parsed['armor'] == '0'
        assert 'attacks_per_round' not in ctx.parsed
        assert 'build' not in ctx.parsed

    def test_explicit_none(self, make_ctx):
        ctx = make_ctx("DB none Attacks per round none")
        attribute_pass(ctx)
        assert ctx.parsed['db'] == '0'
        assert ctx.parsed['attacks_per_round'] == '0'
        assert ctx.text == ""

    def test_negative_damage_bonus_and_build(self, make_ctx):
        ctx = make_ctx("Damage bonus: -1 Build: -1")
        attribute_pass(ctx)
        assert ctx.parsed['db'] == '-1'
        assert ctx.parsed['build'] == '-1'

    def test_german_dice(self, make_ctx):
        ctx = make_ctx("ST 50 SB +1W4 Stabilitätsverlust 1/1W6", lang='de')
        attribute_pass(ctx)
        assert ctx.parsed['str'] == 50
        assert ctx.parsed['db'] == '+1D4'
        assert ctx.parsed['san_loss'] == '1/1D6'

    def test_label_stays_on_its_line(self, make_ctx):
        ctx = make_ctx("Claw 40%, damage 1D6+DB\n2 attacks per round")
        attribute_pass(ctx)
        assert ctx.parsed['db'] == '0'
        assert ctx.text == "Claw 40%, damage 1D6+DB\n2 attacks per round"
