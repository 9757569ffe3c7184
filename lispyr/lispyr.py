# lex
# parse
# walk

__version__ = '0.0.1'

from lispyr.location import resolve

debug = False


class LispyrError(Exception): pass


class _m:
    """ helper methods"""

    def eq_value(self, other):
        return type(self) == type(other) and self.value == other.value

    def eq_args(self, other):
        return type(self) == type(other) and self.args == other.args

    def hash_value(self):
        return hash((self.__class__, self.value))

    def hash_args(self):
        return hash((self.__class__, self.args))


class Located:
    """ Some value with a half open span [begin, end) in the source.
        Tokens and lexical errors are both wrapped in these so that
        everything that can be reported carries its own span. """

    __slots__ = ('begin', 'end', 'value')

    def __init__(self, begin, end, value):
        self.begin = begin
        self.end = end
        self.value = value

    def __eq__(self, other):
        return (type(self) == type(other) and
                self.begin == other.begin and
                self.end == other.end and
                self.value == other.value)

    def __hash__(self):
        return hash((self.begin, self.end, self.value))

    def __repr__(self):
        return f'<Lo {self.value!r} ::{self.begin}:{self.end}>'

    def text(self, source):
        return source[self.begin:self.end]

    def location(self, path, source):
        return resolve(path, source, self.begin)
