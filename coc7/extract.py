AS_STRING = 's'
AS_NUMBER = 'n'

MAX_LOOPS = 40


class ParseContext():
    """Working state of one parse: the shrinking text buffer, the record
    being accumulated and the read only pattern set."""

    def __init__(self, text, patterns, host):
        self.text = text
        self.parsed = {}
        self.patterns = patterns
        self.host = host

    def __repr__(self):
        return "<ParseContext %s %s>" % (self.patterns.lang, self.parsed)


def to_number(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def remove_span(text, start, end):
    source = text[start:end]
    if source.strip() == '':
        return text
    start = start + len(source) - len(source.lstrip())
    end = end - (len(source) - len(source.rstrip()))
    return (text[:start] + '\n' + text[end:]).strip()


def remove_first(text, source):
    source = source.strip()
    if source == '':
        return text
    return text.replace(source, '\n', 1).strip()


def consume(text, found):
    return text[:found['index']] + '\n' + text[found['end']:]


def save_groups(parsed, groups, value_type):
    for key, value in groups.items():
        if value is None or key in parsed:
            continue
        if value_type == AS_NUMBER:
            value = to_number(value)
            if value is None:
                continue
            parsed[key] = value
        else:
            parsed[key] = str(value).replace('\n', ' ')


def check(ctx, key, remove_from_text=True, save_keys=True,
          value_type=AS_STRING, text=None, required_group=None):
    """Attempt one match of the pattern named key.

    Searches the live buffer, or text when given. A match on the buffer is
    cut out by its offsets; a match on a caller supplied span is cut out of
    the buffer by its first textual occurrence. Returns None when there is
    no match, otherwise a dict holding the named groups, the matched
    source and its start and end offsets within the searched text.
    """
    regex = ctx.patterns.lookup(key)
    if regex is None:
        return None
    on_buffer = text is None
    if on_buffer:
        text = ctx.text
    m = regex.search(text)
    if m is None:
        return None
    groups = m.groupdict()
    if required_group and groups.get(required_group) is None:
        return None
    if remove_from_text:
        if on_buffer:
            ctx.text = remove_span(ctx.text, m.start(), m.end())
        else:
            ctx.text = remove_first(ctx.text, m.group(0))
    if save_keys:
        save_groups(ctx.parsed, groups, value_type)
    return {
        'groups': groups,
        'source': m.group(0),
        'index': m.start(),
        'end': m.end()
    }
