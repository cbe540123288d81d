from nullperf._utils import comma_separated, unique


# Negative count: run each language during abs(count) seconds
DEFAULT_COUNT = -1


class UsageError(Exception):
    pass


class Selection:
    __slots__ = ('count', 'names')

    def __init__(self, count, names):
        self.count = count
        self.names = names

    def is_time_budget(self):
        return self.count <= 0

    def __repr__(self):
        return '<Selection count=%s names=%r>' % (self.count, self.names)


def parse_langs(langs):
    if not isinstance(langs, str):
        raise UsageError("--langs must be a string, got %s"
                         % type(langs).__name__)
    names = unique(comma_separated(langs))
    if not names:
        raise UsageError("--langs: empty list of languages: %r" % langs)
    return names


def resolve(count, langs, registry):
    """Resolve the iteration count and the ordered list of language names.

    langs is a comma-separated list of names, or None to select all
    registered languages. Names are not checked against the registry.
    """
    if count is None:
        count = DEFAULT_COUNT
    elif isinstance(count, bool) or not isinstance(count, int):
        raise UsageError("--count must be an integer, got %r" % (count,))

    if langs is None:
        names = registry.names()
    else:
        names = parse_langs(langs)
    return Selection(count, names)
