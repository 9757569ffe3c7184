from .lispyr import (
    LispyrError,
    Located,
    __version__)

from .location import (
    Location,
    resolve,
    report,)

# tokens and lexical errors
from .lexer import (
    Lexer,
    tokenize,
    Token,
    LParen,
    RParen,
    IntegerToken,
    SymbolToken,
    LexError,
    UnexpectedCharacter,
    IntegerParseError,)

# ast nodes
from .objects import (
    Object,
    Void,
    Bool,
    Integer,
    Symbol,
    List,
    Lambda,)

# parser and parse errors
from .parser import (
    Parser,
    parse,
    parse_list,
    ParseError,
    UnexpectedEndOfFile,
    LexerError,
    UnexpectedToken,
    MaxNestingExceeded,)

from .walks import (
    Walk,
    WalkRead,
    WalkError,)

# configs
from .reader import (
    configure,
    conf_read,
    make_do_path,
    conf_default,
    conf_bounded,)

from .repl import (
    Env,
    Evaluator,
    repl,)
