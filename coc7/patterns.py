import re
from functools import lru_cache

DEFAULT_LANGUAGE = 'en'

# Lexical keys per language. Values are regular expression fragments; the
# field templates in build_templates() are assembled from them.
LANGUAGE_KEYS = {
    'en': {
        'description': 'English',
        'none': 'none',
        'str': 'STR',
        'con': 'CON',
        'siz': 'SIZ',
        'dex': 'DEX',
        'app': 'APP',
        'int': 'INT',
        'pow': 'POW',
        'edu': 'EDU',
        'san': 'SAN|Sanity',
        'hp': 'HP|Hit points',
        'mp': 'MP|Magic points',
        'db': 'DB|Damage bonus',
        'build': 'Build',
        'armor': 'Armou?r',
        'mov': 'MOV|Move',
        'lck': 'Luck|LCK',
        'san_loss': 'Sanity loss|SAN loss',
        'attacks_per_round': r'Attacks per round|#\s*Attacks',
        'age': 'age|aged',
        'occupation': 'occupation',
        'dodge': 'Dodge',
        'damage': 'damage|dmg',
        'section_combat': 'combat|fighting attacks',
        'section_skills': 'skills',
        'section_languages': 'languages',
        'section_spells': 'spells',
        'new_combat_header': '\nCombat\n',
        'guess_start_combat': 'Brawl|Fighting|Firearms',
        'halfdb': r'½\s*DB|half\s*DB|DB\s*/\s*2',
        'fulldb': 'DB',
        'handgun': r'pistol|revolver|handgun|derringer|beretta|luger|desert eagle|\.(?:22|25|32|38|45)\b',
        'rifle': 'rifle|shotgun|carbine|gauge|lee-enfield|winchester|musket|elephant gun',
        'smb': 'submachine gun|smg|thompson|tommy gun|uzi',
        'machine_gun': 'machine gun|browning|vickers|lewis gun|minigun',
        'launched': 'molotov|grenade|dynamite|launcher|bazooka|rocket',
    },
    'de': {
        'description': 'Deutsch',
        'dice_short': 'W',
        'none': 'keine?',
        'str': 'ST',
        'con': 'KO',
        'siz': 'GR',
        'dex': 'GE',
        'app': 'ER',
        'int': 'IN',
        'pow': 'MA',
        'edu': 'BI',
        'san': 'STA|Stabilität',
        'hp': 'TP|Trefferpunkte',
        'mp': 'MP|Magiepunkte',
        'db': 'SB|Schadensbonus',
        'build': 'Statur',
        'armor': 'Panzerung',
        'mov': 'BW|Bewegungsweite',
        'lck': 'Glück',
        'san_loss': 'Stabilitätsverlust|STA-Verlust',
        'attacks_per_round': 'Angriffe pro Runde|Anzahl Angriffe',
        'age': 'Alter',
        'occupation': 'Beruf',
        'dodge': 'Ausweichen',
        'damage': 'Schaden',
        'section_combat': 'Kampf|Angriffe',
        'section_skills': 'Fertigkeiten',
        'section_languages': 'Sprachen',
        'section_spells': 'Zauber',
        'new_combat_header': '\nKampf\n',
        'guess_start_combat': 'Handgemenge|Nahkampf|Schusswaffen',
        'halfdb': r'½\s*SB|halber\s*SB|SB\s*/\s*2',
        'fulldb': 'SB',
        'handgun': r'pistole|revolver|derringer|beretta|luger|\.(?:22|25|32|38|45)\b',
        'rifle': 'gewehr|flinte|karabiner|kaliber|muskete',
        'smb': 'maschinenpistole|thompson|uzi',
        'machine_gun': 'maschinengewehr|browning|vickers',
        'launched': 'molotow|granate|dynamit|werfer|panzerfaust',
    },
    'fr': {
        'description': 'Français',
        'none': 'aucune?',
        'str': 'FOR',
        'con': 'CON',
        'siz': 'TAI',
        'dex': 'DEX',
        'app': 'APP',
        'int': 'INT',
        'pow': 'POU',
        'edu': 'ÉDU|EDU',
        'san': 'SAN|Santé mentale',
        'hp': 'PV|Points de vie',
        'mp': 'PM|Points de magie',
        'db': 'Impact|BD',
        'build': 'Carrure',
        'armor': 'Armure|Protection',
        'mov': 'MVT|Mouvement',
        'lck': 'Chance',
        'san_loss': 'Perte de SAN|Perte de santé mentale',
        'attacks_per_round': 'Attaques par round|Nombre d\'attaques',
        'age': 'âge|age',
        'occupation': 'profession|occupation',
        'dodge': 'Esquive',
        'damage': 'dommages|dégâts',
        'section_combat': 'combat|attaques',
        'section_skills': 'compétences',
        'section_languages': 'langues',
        'section_spells': 'sortilèges|sorts',
        'new_combat_header': '\nCombat\n',
        'guess_start_combat': 'Corps à corps|Combat rapproché|Armes à feu',
        'halfdb': r'½\s*(?:Impact|BD)|demi[-\s]impact',
        'fulldb': 'Impact|BD',
        'handgun': r'pistolet|revolver|derringer|beretta|luger|\.(?:22|25|32|38|45)\b',
        'rifle': 'fusil|carabine|calibre|mousquet',
        'smb': 'pistolet-mitrailleur|mitraillette|thompson|uzi',
        'machine_gun': 'mitrailleuse|browning|vickers',
        'launched': 'molotov|grenade|dynamite|lance-roquettes|bazooka',
    },
    'es': {
        'description': 'Español',
        'none': 'ningun[oa]?',
        'str': 'FUE',
        'con': 'CON',
        'siz': 'TAM',
        'dex': 'DES',
        'app': 'APA',
        'int': 'INT',
        'pow': 'POD',
        'edu': 'EDU',
        'san': 'COR|Cordura',
        'hp': 'PV|Puntos de vida',
        'mp': 'PM|Puntos de magia',
        'db': 'BD|Bonificación al daño',
        'build': 'Corpulencia',
        'armor': 'Armadura|Blindaje',
        'mov': 'MOV|Movimiento',
        'lck': 'Suerte',
        'san_loss': 'Pérdida de COR|Pérdida de cordura',
        'attacks_per_round': 'Ataques por asalto|Número de ataques',
        'age': 'edad',
        'occupation': 'ocupación|profesión',
        'dodge': 'Esquivar',
        'damage': 'daño',
        'section_combat': 'combate|ataques',
        'section_skills': 'habilidades',
        'section_languages': 'idiomas|lenguas',
        'section_spells': 'conjuros|hechizos',
        'new_combat_header': '\nCombate\n',
        'guess_start_combat': 'Pelea|Combatir|Armas de fuego',
        'halfdb': r'½\s*BD|medio\s*BD|BD\s*/\s*2',
        'fulldb': 'BD',
        'handgun': r'pistola|revólver|revolver|derringer|beretta|luger|\.(?:22|25|32|38|45)\b',
        'rifle': 'rifle|escopeta|carabina|fusil|calibre|mosquete',
        'smb': 'subfusil|metralleta|thompson|uzi',
        'machine_gun': 'ametralladora|browning|vickers',
        'launched': 'molotov|granada|dinamita|lanzacohetes|bazooka',
    },
}

CHARACTERISTICS = ['str', 'con', 'siz', 'dex', 'app', 'int', 'pow', 'edu']
HEADER_FIELDS = ['str', 'con', 'siz', 'int', 'pow', 'dex', 'app', 'edu',
                 'san', 'hp', 'mp']
WEAPON_CATEGORIES = ['handgun', 'rifle', 'smb', 'machine_gun', 'launched']
SECTIONS = ['section_combat', 'section_skills', 'section_languages',
            'section_spells']


def check_language(lang):
    if lang in LANGUAGE_KEYS:
        return lang
    return DEFAULT_LANGUAGE


def _label(words):
    return r'(?<!\w)(?:' + words + r')(?!\w)[:\t ]*'


def _dice(keys):
    letters = 'D' + keys.get('dice_short', '')
    die = r'\d+(?:[' + letters + r']\d+)?'
    return die + r'(?:\s*[+-]\s*' + die + r')*'


def build_templates(keys):
    dice = _dice(keys)
    number = r'(?P<%s>\d+)'
    templates = {}
    for key in CHARACTERISTICS + ['hp', 'mp', 'mov', 'lck']:
        templates[key] = _label(keys[key]) + number % key
    templates['san'] = _label(keys['san']) + r'(?P<san>\d+)(?![\d/])'
    templates['db'] = _label(keys['db']) + \
        r'(?P<db>[+-]?' + dice + '|' + keys['none'] + r')(?!\w)'
    templates['db_none'] = r'^(?:' + keys['none'] + r')$'
    templates['build'] = _label(keys['build']) + r'(?P<build>[+-]?\d+)'
    templates['armor'] = _label(keys['armor']) + \
        r'(?P<armor>\d+|' + keys['none'] + r')(?!\w)'
    templates['armor_none'] = templates['db_none']
    templates['san_loss'] = _label(keys['san_loss']) + \
        r'(?P<san_loss>' + dice + r'\s*/\s*' + dice + ')'
    templates['attacks_per_round'] = _label(keys['attacks_per_round']) + \
        r'(?P<attacks_per_round>\d+|' + keys['none'] + r')(?!\w)'
    templates['attacks_per_round_none'] = templates['db_none']

    templates['name'] = r'^\s*(?P<name>[^\s,(][^,\n(]*?)\s*\.?\s*(?:,|\n|\(|$)'
    templates['age'] = _label(keys['age']) + r'(?P<age>\d+)'
    templates['occupation'] = _label(keys['occupation']) + \
        r'(?P<occupation>[^\n.,]+)'

    half_fifth = r'(?:\s*\(\d+/\d+\))?'
    templates['weapon_dodge'] = r'(?P<name>' + keys['dodge'] + \
        r')[:\s]*\(?(?P<percentage>\d+)\)?\s*%?' + half_fifth
    templates['weapon'] = r'(?P<name>[^,\n%:]+?)[:\s]*' + \
        r'(?:\(?(?P<percentage>\d+)\)?\s*%)?' + half_fifth + \
        r'(?:\s*,?\s*(?:' + keys['damage'] + r')(?!\w)[:\s]*(?P<damage>[^\n,]+))?' + \
        r'\s*(?:,|\n|$)'
    templates['skill'] = r'(?P<name>[^,\d%;:\n]+?)[:\s]*\(?(?P<percentage>\d+)\)?\s*%' + \
        half_fifth

    for key in SECTIONS:
        templates[key] = r'\n[ \t]*(?:' + keys[key] + r')(?!\w)'
    templates['sections'] = r'(\n[ \t]*(?:' + \
        '|'.join([keys[key] for key in SECTIONS]) + r')(?!\w)[ \t]*:?)'
    templates['guess_start_combat'] = r'\n[ \t]*(?:' + \
        keys['guess_start_combat'] + r')(?!\w)[^\n]*\d+\s*%'
    return templates


class PatternSet():
    def __init__(self, lang):
        self.lang = check_language(lang)
        self.keys = dict(LANGUAGE_KEYS[self.lang])
        self.templates = build_templates(self.keys)
        self._compiled = {}

    def lookup(self, key):
        """Compiled pattern for a field template, falling back to a raw
        lexical key. Returns None when neither exists."""
        if key in self._compiled:
            return self._compiled[key]
        regex = None
        if key in self.templates:
            regex = re.compile(self.templates[key], re.IGNORECASE)
        elif key in self.keys:
            regex = re.compile(self.keys[key], re.IGNORECASE)
        self._compiled[key] = regex
        return regex

    def __repr__(self):
        return "<PatternSet %s>" % self.lang


@lru_cache(maxsize=None)
def get_patterns(lang):
    return PatternSet(lang)


def translate_roll(patterns, roll):
    if roll is None:
        return roll
    if 'dice_short' not in patterns.keys:
        return roll
    regex = re.compile(r'(\d+)' + patterns.keys['dice_short'] + r'(\d+)',
                       re.IGNORECASE)
    return regex.sub(r'\1D\2', str(roll))
