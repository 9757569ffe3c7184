from io import TextIOBase
from lispyr import lispyr
from lispyr.lexer import Lexer
from lispyr.parser import Parser


def make_do_path(do, chunksize=4096):
    """ along the way to load """
    def do_path(path_or_fd):
        if isinstance(path_or_fd, TextIOBase):  # stdin probably
            f = path_or_fd
            source = ''.join(iter(lambda: f.read(chunksize), ''))
        else:
            with open(path_or_fd, 'rt') as f:
                source = f.read()

        return do(source)

    return do_path


def conf_read(parser, walk_cls):

    def read(source):
        walk = walk_cls()  # avoid any whiff of threading issues
        expression = parser(source)
        if lispyr.debug:
            print('read:', expression)

        return walk(expression)

    return read


def configure(operators=Lexer.operators,  # single char symbols
              symbol_chars=Lexer.symbol_chars,  # may follow the first char of a symbol
              max_depth=None,  # None for no limit other than memory
              ):
    """ Returns a parse function that takes source text and returns
        the Object for all of it, raising a ParseError on failure. """

    def lexer(source):
        return Lexer(source, operators=operators, symbol_chars=symbol_chars)

    def parse(source):
        return Parser(lexer(source), max_depth=max_depth).parse()

    def forms(source):
        return Parser(lexer(source), max_depth=max_depth).forms()

    parse.lexer = lexer
    parse.forms = forms
    return parse


# configurations

conf_default = {
    'operators':    '+-',
    'symbol_chars': '_',
}

conf_bounded = {
    **conf_default,
    'max_depth': 1024,
}
