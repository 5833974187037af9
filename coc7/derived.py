"""Values a 7th edition sheet derives from characteristics.

Each helper returns None when the characteristics it needs are missing."""


def _values(parsed, keys):
    values = []
    for key in keys:
        value = parsed.get(key)
        if not isinstance(value, (int, float)):
            return None
        values.append(value)
    return values


def derived_hp(parsed):
    values = _values(parsed, ['con', 'siz'])
    if values is None:
        return None
    return int(sum(values) // 10)


def derived_mp(parsed):
    values = _values(parsed, ['pow'])
    if values is None:
        return None
    return int(values[0] // 5)


def derived_mov(parsed):
    values = _values(parsed, ['str', 'dex', 'siz'])
    if values is None:
        return None
    strength, dex, siz = values
    if dex < siz and strength < siz:
        mov = 7
    elif dex > siz and strength > siz:
        mov = 9
    else:
        mov = 8
    age = parsed.get('age')
    if isinstance(age, int) and age >= 40:
        mov -= min(5, (age - 30) // 10)
    return mov


def derived_build_db(parsed):
    values = _values(parsed, ['str', 'siz'])
    if values is None:
        return None, None
    total = sum(values)
    if total < 65:
        return -2, '-2'
    if total < 85:
        return -1, '-1'
    if total < 125:
        return 0, '0'
    if total < 165:
        return 1, '1D4'
    if total < 205:
        return 2, '1D6'
    # Every further 80 points adds a D6 and a point of build
    dice = 2 + int(total - 205) // 80
    return dice + 1, '%dD6' % dice
