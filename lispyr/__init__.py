from .lispyr import __version__

from .location import resolve

from .lexer import Lexer, tokenize

from .objects import (
    Void,
    Bool,
    Integer,
    Symbol,
    List,
    Lambda,)

from .parser import (
    Parser,
    parse,
    parse_list,
    ParseError,
    UnexpectedEndOfFile,
    LexerError,
    UnexpectedToken,)

from .reader import (
    configure,
    conf_read,
    conf_default,
    conf_bounded)
