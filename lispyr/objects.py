from lispyr.lispyr import _m


class Object:
    """ Base for the values that the parser produces. """

    __eq__ = _m.eq_value
    __hash__ = None

    def _set_bounds(self, beg=None, end=None):
        self._point_beg = beg
        self._point_end = end
        return self

    def __repr__(self):
        pts = ''
        if getattr(self, '_point_beg', None) is not None:
            pts = f' ::{self._point_beg}:{self._point_end}'

        return f'<{self.__class__.__name__[:2]} {self}{pts}>'


class Void(Object):
    """ What an empty program reads as. """

    value = None
    __hash__ = _m.hash_value

    def __str__(self):
        return 'Void'


class Bool(Object):

    __hash__ = _m.hash_value

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return 'true' if self.value else 'false'


class Integer(Object):

    __hash__ = _m.hash_value

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return str(self.value)


class Symbol(Object):

    __hash__ = _m.hash_value

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return self.value


class List(Object):

    @classmethod
    def from_elements(cls, *elements):
        return cls(list(elements))

    def __init__(self, value):
        self.value = value

    def _parts(self):
        parts = ['(']
        for i, v in enumerate(self.value):
            if i:
                parts.append(' ')
            parts.append(v)

        parts.append(')')
        return parts

    def __str__(self):
        return render(self)


class Lambda(Object):

    def __init__(self, params, body):
        self.params = params
        self.body = body

    def __eq__(self, other):
        return (type(self) == type(other) and
                self.params == other.params and
                self.body == other.body)

    @property
    def value(self):
        return self.params, self.body

    def _parts(self):
        parts = [f'(lambda ({" ".join(self.params)})']
        for b in self.body:
            parts.append(' ')
            parts.append(b)

        parts.append(')')
        return parts

    def __str__(self):
        return render(self)


def render(obj):
    """ Print an object without recursing on the python stack, the
        parser accepts nesting far deeper than the recursion limit. """
    out = []
    todo = [obj]
    while todo:
        node = todo.pop()
        if isinstance(node, str):
            out.append(node)
        elif isinstance(node, (List, Lambda)):
            todo.extend(reversed(node._parts()))
        else:
            out.append(str(node))

    return ''.join(out)
