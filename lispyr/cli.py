""" lispyr parse, print tokens, or loop

Usage:
    lispyr parse  [options] [<path>...]
    lispyr tokens [options] [<path>...]
    lispyr repl   [options]

Options:
    --max-depth=N    refuse lists nested deeper than N
    --read           cast booleans and lambda forms after parsing
    --fuzz           run parse under afl
    -d --debug       print what is lexed and parsed
"""

import sys
import pathlib
import clifn
from lispyr import lispyr as lispyrmod
from lispyr._exports import *
from lispyr.location import report
from lispyr.reader import make_do_path


def readFromStdIn(stdin=None):
    from select import select
    if stdin is None:
        from sys import stdin
    if select([stdin], [], [], 0.0)[0]:
        return stdin


def _name(path):
    return '<stdin>' if not isinstance(path, pathlib.PurePath) else str(path)


def _source(path):
    return make_do_path(lambda source: source)(path)


def parse_paths(paths, parse, out=None, err=None):
    """ Parse each path, print forms to out and located errors to err.
        Returns the names of the paths that failed. """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    failed = []
    for path in paths:
        name = _name(path)
        try:
            source = _source(path)
        except (OSError, UnicodeDecodeError) as e:
            failed.append(name)
            print(f'{name}: {e}', file=err)
            continue

        try:
            value = parse(source)
        except SyntaxError as e:
            failed.append(name)
            print(report(name, source, e), file=err)
            continue

        print(value, file=out)

    return failed


def token_paths(paths, lexer, out=None, err=None):
    """ Print every token with its location, lexical errors go to err. """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    failed = []
    for path in paths:
        name = _name(path)
        try:
            source = _source(path)
        except (OSError, UnicodeDecodeError) as e:
            failed.append(name)
            print(f'{name}: {e}', file=err)
            continue

        for located in lexer(source):
            loc = located.location(name, source)
            if isinstance(located.value, LexError):
                if name not in failed:
                    failed.append(name)
                print(f'{loc}: {located.value}', file=err)
            else:
                print(f'{loc}: {located.value!r}', file=out)

    return failed


class Options(clifn.Options):

    @property
    def path(self):
        return [pathlib.Path(path).expanduser() for path in self._args['<path>']]

    @property
    def max_depth(self):
        md = self._args['--max-depth']
        return int(md) if md is not None else None

    @property
    def read(self):
        return self._args['--read']


class Main(clifn.Dispatcher):

    def default(self):
        raise NotImplementedError('oops')

    def _parse(self):
        parse = configure(**conf_default, max_depth=self.options.max_depth)
        if self.options.read:
            return conf_read(parse, WalkRead), parse.lexer

        return parse, parse.lexer

    def _paths(self):
        if not self.options.path:
            stdin = readFromStdIn()
            return [stdin] if stdin is not None else []

        return self.options.path

    def parse(self):
        lispyrmod.debug = self.options.debug
        parse, _ = self._parse()
        return parse_paths(self._paths(), parse)

    def tokens(self):
        lispyrmod.debug = self.options.debug
        _, lexer = self._parse()
        return token_paths(self._paths(), lexer)

    def repl(self):
        lispyrmod.debug = self.options.debug
        parse, _ = self._parse()
        return repl(parse=parse)


def main():
    options, *ad = Options.setup(__doc__, version=f'lispyr {lispyrmod.__version__}')

    main = Main(options)

    if main.options.debug:
        print(main.options)

    if options.fuzz:
        import os
        import afl
        while afl.loop(55555):
            out = main()

        os._exit(0)
    else:
        out = main()

    if out:
        sys.exit(1)


if __name__ == '__main__':
    main()
