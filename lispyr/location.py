""" Turn offsets into something a human (or an editor) can jump to. """


class Location:
    """ path:line:column, line and column are both 1-based """

    __slots__ = ('path', 'line', 'column')

    def __init__(self, path, line, column):
        self.path = path
        self.line = line
        self.column = column

    def __eq__(self, other):
        return (type(self) == type(other) and
                (self.path, self.line, self.column) ==
                (other.path, other.line, other.column))

    def __hash__(self):
        return hash((self.path, self.line, self.column))

    def __repr__(self):
        return f'<Location {self}>'

    def __str__(self):
        # the format that compilers use so editors can parse it
        return f'{self.path}:{self.line}:{self.column}'


def resolve(path, source, offset):
    """ Resolve an offset into source to a Location.

        The offset is clamped to [0, len(source)] so every offset
        resolves. An offset that lands on a newline belongs to the
        line that the newline ends. """

    offset = min(max(offset, 0), len(source))
    # after a trailing newline (or in empty source) this is the next
    # line rather than a count of lines, so lines never go backwards
    line = source.count('\n', 0, offset) + 1
    last_newline = source.rfind('\n', 0, offset)
    if last_newline == -1:
        column = offset + 1
    else:
        column = offset - last_newline

    return Location(path, line, column)


def report(path, source, error):
    """ Prefix an error message with the location of its span. """
    begin = getattr(error, 'begin', None)
    if begin is None:
        begin = len(source)

    return f'{resolve(path, source, begin)}: {error}'
