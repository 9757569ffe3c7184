from lispyr import lispyr
from lispyr.lispyr import LispyrError
from lispyr.lexer import LexError, LParen, RParen, IntegerToken, SymbolToken
from lispyr.objects import Void, Integer, Symbol, List


class ParseError(LispyrError, SyntaxError):
    """ Base for everything that stops a parse. begin and end are
        the span to report, None if there is nothing to point at. """

    begin = None
    end = None

    def __str__(self):
        return self.message

    message = 'Parse error.'


class UnexpectedEndOfFile(ParseError):

    message = 'Unexpected end of file.'

    def __init__(self, begin=None, end=None):
        super().__init__(self.message)
        self.begin = begin
        self.end = end


class _LocatedParseError(ParseError):

    def __init__(self, located):
        super().__init__(located)
        self.located = located
        self.begin = located.begin
        self.end = located.end

    @property
    def value(self):
        return self.located.value


class LexerError(_LocatedParseError):
    """ A lexical error passed through untouched. """

    @property
    def message(self):
        return f'Lexical error: {self.located.value}'


class UnexpectedToken(_LocatedParseError):

    @property
    def message(self):
        return f'Unexpected token: {str(self.located.value)!r}'


class MaxNestingExceeded(_LocatedParseError):

    @property
    def message(self):
        return 'Maximum nesting depth exceeded.'


class Parser:
    """ Recursive descent over the tokens from a Lexer.

        The descent into nested lists keeps its own stack instead of
        using the python call stack so deep nesting is limited by
        memory, or by max_depth if it is set. """

    def __init__(self, lexer, max_depth=None):
        self.lexer = lexer
        self.max_depth = max_depth

    def _end_of_file(self):
        end = len(self.lexer.source)
        return UnexpectedEndOfFile(end, end)

    def forms(self):
        """ Yield each top level list as soon as it closes. """
        for located in self.lexer:
            token = located.value
            if isinstance(token, LexError):
                raise LexerError(located)
            elif isinstance(token, LParen):
                form = self.parse_list(_opened=located)
                if lispyr.debug:
                    print('parse:', form)

                yield form
            else:
                raise UnexpectedToken(located)

    def parse(self):
        lists = list(self.forms())
        if not lists:
            return Void()
        elif len(lists) == 1:
            return lists[0]
        else:
            return List(lists)._set_bounds(lists[0]._point_beg,
                                           lists[-1]._point_end)

    def parse_list(self, _opened=None):
        """ Parse one list, the opening paren must already be consumed. """
        # each frame is the opening paren and the children collected so far
        begin = _opened.begin if _opened is not None else None
        stack = [(begin, [])]
        for located in self.lexer:
            token = located.value
            begin, children = stack[-1]
            if isinstance(token, LexError):
                raise LexerError(located)
            elif isinstance(token, LParen):
                if self.max_depth is not None and len(stack) >= self.max_depth:
                    raise MaxNestingExceeded(located)

                stack.append((located.begin, []))
            elif isinstance(token, SymbolToken):
                children.append(
                    Symbol(token.value)._set_bounds(located.begin, located.end))
            elif isinstance(token, IntegerToken):
                children.append(
                    Integer(token.value)._set_bounds(located.begin, located.end))
            elif isinstance(token, RParen):
                stack.pop()
                done = List(children)._set_bounds(begin, located.end)
                if not stack:
                    return done

                stack[-1][1].append(done)
            else:
                raise UnexpectedToken(located)

        raise self._end_of_file()


def parse(lexer, **kwargs):
    return Parser(lexer, **kwargs).parse()


def parse_list(lexer, **kwargs):
    return Parser(lexer, **kwargs).parse_list()
