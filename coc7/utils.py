import re
import warnings
from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)


def split_maintain_parens(text, split, parenleft="(", parenright=")"):
    parts = text.split(split)
    newparts = []
    while len(parts) > 0:
        part = parts.pop(0)
        if part.find(parenleft) > -1 and part.rfind(parenright) < part.rfind(parenleft):
            newpart = part
            # An unclosed paren swallows the rest of the list
            while parts and newpart.find(parenleft) > -1 and newpart.rfind(parenright) < newpart.rfind(parenleft):
                newpart = newpart + split + parts.pop(0)
            newparts.append(newpart)
        else:
            newparts.append(part)
    return [p.strip() for p in newparts]


def normalize_text(text):
    text = str(text).strip()
    text = re.sub("[\u2013\u2014\u2212]", "-", text)
    text = text.replace("\u2019", "'")
    text = text.replace("\u00a0", " ")
    # Decorative glyphs pasted from PDFs live in plane 16 private use
    text = re.sub("[\U00100000-\U0010fffd]", "", text)
    text = re.sub("[\ud800-\udfff]", "", text)
    return text.strip()


def clean_string(text):
    text = re.sub(r'[\n\r]', ' ', text)
    text = re.sub(r'^\s*', '', text)
    return re.sub(r'\s*\.?\s*\.?$', '', text)


def to_html(text):
    if text.strip() == '':
        return ''
    lines = [re.sub(r'^[,.\s]+$', '', line.strip())
             for line in text.strip().split('\n')]
    lines = [line for line in lines if line]
    if len(lines) == 0:
        return ''
    bs = BeautifulSoup('', 'html.parser')
    for line in lines:
        p = bs.new_tag('p')
        p.string = line
        bs.append(p)
    return str(bs)


def set_path(struct, path, value):
    keys = path.split('.')
    last = keys.pop()
    for key in keys:
        if isinstance(struct, list):
            struct = struct[int(key)]
        else:
            struct = struct.setdefault(key, {})
    if isinstance(struct, list):
        struct[int(last)] = value
    else:
        struct[last] = value
