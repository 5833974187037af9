from coc7.extract import check, AS_NUMBER
from coc7.patterns import HEADER_FIELDS, translate_roll


def characteristics_pass(ctx):
    for key in HEADER_FIELDS:
        check(ctx, key, value_type=AS_NUMBER)


def _is_none(ctx, key, value):
    return check(ctx, key, remove_from_text=False, save_keys=False,
                 text=str(value))


def attribute_pass(ctx):
    characteristics_pass(ctx)
    parsed = ctx.parsed
    # Missing or "none" damage bonus and armor both mean zero
    if not check(ctx, 'db') or _is_none(ctx, 'db_none', parsed['db']):
        parsed['db'] = '0'
    parsed['db'] = translate_roll(ctx.patterns, parsed['db'])
    check(ctx, 'build')
    if not check(ctx, 'armor') or _is_none(ctx, 'armor_none', parsed['armor']):
        parsed['armor'] = '0'
    check(ctx, 'mov', value_type=AS_NUMBER)
    check(ctx, 'lck', value_type=AS_NUMBER)
    if check(ctx, 'san_loss'):
        parsed['san_loss'] = translate_roll(ctx.patterns, parsed['san_loss'])
    # Absent attacks per round stays absent, only an explicit "none" is zero
    if check(ctx, 'attacks_per_round') and _is_none(
            ctx, 'attacks_per_round_none', parsed['attacks_per_round']):
        parsed['attacks_per_round'] = '0'
