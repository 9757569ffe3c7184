from lispyr import lispyr
from lispyr.lispyr import LispyrError, Located, _m

digits = '0123456789'

# digit runs are never negative so only the top of i64 matters
int_max = 2 ** 63 - 1
_int_max_text = str(int_max)


def fits_int(text):
    """ Compare as strings, int() refuses very long digit runs. """
    stripped = text.lstrip('0')
    if len(stripped) != len(_int_max_text):
        return len(stripped) < len(_int_max_text)

    return stripped <= _int_max_text


# tokens

class Token:
    """ Base for tokens, str gives the lexeme back. """

    __eq__ = _m.eq_value
    __hash__ = _m.hash_value

    value = None

    def __repr__(self):
        return f'<{self.__class__.__name__} {self}>'


class LParen(Token):

    def __str__(self):
        return '('


class RParen(Token):

    def __str__(self):
        return ')'


class IntegerToken(Token):

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return str(self.value)


class SymbolToken(Token):
    """ Identifiers and the single char operators. """

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return self.value


# lexical errors, these are produced as values not raised

class LexError(LispyrError):

    __eq__ = _m.eq_args
    __hash__ = _m.hash_args


class UnexpectedCharacter(LexError):

    def __init__(self, char):
        super().__init__(char)
        self.char = char

    def __str__(self):
        return f'Unexpected character: {self.char!r}'


class IntegerParseError(LexError):
    """ A run of digits that does not fit in 64 bits. """

    def __init__(self, text):
        super().__init__(text)
        self.text = text

    def __str__(self):
        return f'Invalid integer literal: {self.text!r}'


class Lexer:
    """ Pull tokens out of source one at a time.

        Iterating yields Located tokens and Located lexical errors,
        once the source is exhausted iteration stays exhausted. """

    operators = '+-'
    symbol_chars = '_'

    def __init__(self, source, operators=None, symbol_chars=None):
        self.source = source
        self._point = 0
        if operators is not None:
            self.operators = operators
        if symbol_chars is not None:
            self.symbol_chars = symbol_chars

    def __iter__(self):
        return self

    def __next__(self):
        item = self._next()
        if item is None:
            raise StopIteration

        if lispyr.debug:
            print('lex:', item)

        return item

    def _peek(self):
        if self._point < len(self.source):
            return self.source[self._point]

    def skip_whitespace(self):
        """ Advance past whitespace and consume the next char.
            Returns (point, char) or None at the end of input. """
        source = self.source
        point = self._point
        while point < len(source) and source[point].isspace():
            point += 1

        if point >= len(source):
            self._point = point
            return None

        self._point = point + 1
        return point, source[point]

    def consume_while(self, predicate):
        """ Advance while predicate holds, return the end point of the run. """
        while True:
            char = self._peek()
            if char is None or not predicate(char):
                return self._point

            self._point += 1

    def _is_symbol_char(self, char):
        return char.isalnum() or char in self.symbol_chars

    def _next(self):
        pc = self.skip_whitespace()
        if pc is None:
            return None

        begin, char = pc
        if char == '(':
            return Located(begin, begin + 1, LParen())
        elif char == ')':
            return Located(begin, begin + 1, RParen())
        elif char in self.operators:
            return Located(begin, begin + 1, SymbolToken(char))
        elif char in digits:
            end = self.consume_while(lambda c: c in digits)
            text = self.source[begin:end]
            if not fits_int(text):
                return Located(begin, end, IntegerParseError(text))

            value = int(text.lstrip('0') or '0')
            return Located(begin, end, IntegerToken(value))
        elif char.isalpha():
            end = self.consume_while(self._is_symbol_char)
            return Located(begin, end, SymbolToken(self.source[begin:end]))
        else:
            return Located(begin, begin + 1, UnexpectedCharacter(char))


def tokenize(source, **kwargs):
    return list(Lexer(source, **kwargs))
