import sys
from lispyr.lispyr import LispyrError
from lispyr.location import report
from lispyr.objects import Void
from lispyr.reader import configure


class Env:
    """ Variable bindings with a link to the enclosing environment. """

    def __init__(self, parent=None):
        self.parent = parent
        self.vars = {}


class Evaluator:
    """ Not implemented, everything evaluates to Void. """

    def __init__(self, ast, env=None):
        self.ast = ast
        self.env = Env() if env is None else env

    def eval(self):
        return Void()


def repl(stdin=None, stdout=None, stderr=None, prompt='> ',
         parse=None, path='<stdin>'):
    """ Read a line, parse it, print it, loop until EOF.
        Returns the number of lines that failed to parse. """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr
    if parse is None:
        parse = configure()

    env = Env()
    failed = 0
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break

        line = line.rstrip('\r\n')
        try:
            value = parse(line)
        except (LispyrError, SyntaxError) as e:
            failed += 1
            print(report(path, line, e), file=stderr)
            continue

        print(value, file=stdout)
        result = Evaluator(value, env).eval()
        if result != Void():
            print(result, file=stdout)

    return failed
