import copy
from coc7.patterns import CHARACTERISTICS

CONVERT_GUESS = 'coc-guess'
CONVERT_FORCE = 'coc-convert'
CONVERT_SKIP = 'coc-no-convert'
CONVERSION_MODES = [CONVERT_GUESS, CONVERT_FORCE, CONVERT_SKIP]

# Legacy damage bonus dice that 7th edition expresses as flat penalties
LEGACY_DAMAGE_BONUS = {
    '-1D4': -1,
    '-1D6': -2,
}


def needs_conversion(parsed):
    """6th edition characteristics never go above 30"""
    for key in CHARACTERISTICS:
        if key in parsed and parsed[key] > 30:
            return False
    return True


def should_convert(parsed, mode):
    if mode == CONVERT_FORCE:
        return True
    if mode == CONVERT_GUESS:
        return needs_conversion(parsed)
    return False


def convert_edu(edu):
    if edu <= 18:
        return edu * 5
    elif edu <= 26:
        return edu + 90 - 18
    return 99


def convert_7e(parsed):
    creature = copy.deepcopy(parsed)
    for key in ['str', 'con', 'siz', 'dex', 'app', 'int', 'pow']:
        if key in creature:
            creature[key] *= 5
    if 'edu' in creature:
        creature['edu'] = convert_edu(creature['edu'])
    if 'db' in creature:
        db = str(creature['db']).replace(' ', '').upper()
        if db in LEGACY_DAMAGE_BONUS:
            creature['db'] = LEGACY_DAMAGE_BONUS[db]
    return creature
