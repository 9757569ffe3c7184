from lispyr import lispyr
from lispyr.lispyr import LispyrError
from lispyr.objects import Object, Bool, Integer, Symbol, List, Lambda


class WalkError(LispyrError, SyntaxError):
    """ A form that parsed but cannot be read. """

    def __init__(self, message, ast=None):
        super().__init__(message)
        self.message = message
        self.ast = ast
        self.begin = getattr(ast, '_point_beg', None)
        self.end = getattr(ast, '_point_end', None)

    def __str__(self):
        return self.message


class Walk:
    """ Rebuild a parsed tree bottom up, dispatching on node type.
        The base walk is the identity, override the type methods. """

    _recurse_funs = (
        (List, '_list'),
    )

    _type_funs = (
        (List, 'list'),
        (Symbol, 'symbol'),
        (Integer, 'integer'),
        (Object, 'other'),
    )

    def __call__(self, ast, recurse=True):
        wlk = ast
        if recurse:
            for cls, attr in self._recurse_funs:
                if isinstance(ast, cls):
                    fun = getattr(self, attr)
                    wlk = fun(ast)
                    break

        for cls, attr in self._type_funs:
            if isinstance(wlk, cls):
                fun = getattr(self, attr)
                out = fun(wlk)
                if out is not wlk:
                    self._loc(out, wlk)
                return out

        return wlk

    @staticmethod
    def _loc(wlk, ast):
        wlk._point_beg = getattr(ast, '_point_beg', None)
        wlk._point_end = getattr(ast, '_point_end', None)
        return wlk

    def _list(self, ast):
        # each frame is the list, an iterator over its children,
        # and the walked children so far, nested lists get a frame
        # instead of a python call so depth matches the parser
        stack = [(ast, iter(ast.value), [])]
        while True:
            node, children, recollect = stack[-1]
            for v in children:
                if isinstance(v, List):
                    stack.append((v, iter(v.value), []))
                    break

                recollect.append(self(v))
            else:
                stack.pop()
                rebuilt = self._loc(List(recollect), node)
                if not stack:
                    return rebuilt

                stack[-1][2].append(self(rebuilt, recurse=False))

    # override these
    def list    (self, ast): return ast
    def symbol  (self, ast): return ast
    def integer (self, ast): return ast
    def other   (self, ast): return ast


class WalkRead(Walk):
    """ Booleans and lambda forms. """

    true, false = 'true', 'false'

    def symbol(self, ast):
        if ast.value == self.true:
            return Bool(True)
        elif ast.value == self.false:
            return Bool(False)
        else:
            return ast

    def list(self, ast):
        value = ast.value
        if not value or value[0] != Symbol('lambda'):
            return ast

        if lispyr.debug:
            print('lambda:', ast)

        if len(value) < 2:
            raise WalkError('lambda without a parameter list', ast)

        params = value[1]
        if not isinstance(params, List):
            raise WalkError(f'lambda parameters must be a list not {params}',
                            params)

        bad = [p for p in params.value if type(p) != Symbol]
        if bad:
            raise WalkError(f'lambda parameter is not a symbol: {bad[0]}',
                            bad[0])

        return Lambda([p.value for p in params.value], value[2:])
