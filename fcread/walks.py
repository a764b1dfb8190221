from fcread import fcread as fcreadmod
from fcread.fcread import (
    Ast, Leaf, _m,
    ListAbstract, List, Vector, Map, Dispatch, Literal, String,
    UnknownFormError, DispatchNotImplementedError,
    make_do_path,
    tokenize, read, tokenize_lines, read_lines)


# second phase types, what an evaluator consumes


class Symbol(Leaf):
    """ Everything literal that does not look like a number. """


class Number(Leaf):
    """ Anything starting with a digit or a minus and a digit.
        The rest of the text is not checked, 12234dd is a number. """


class SExpression(Ast):
    """ Call shaped. Vectors, maps, and sets arrive here with a
        synthetic head symbol naming the constructor. """

    _o, _c = '()'
    __eq__ = _m.eq_collect
    __hash__ = None

    @classmethod
    def from_elements(cls, *elements):
        return cls(list(elements))

    def __init__(self, collect):
        self.collect = collect

    @property
    def value(self):
        return self.collect

    def __repr__(self):
        return f'<sx {repr(self.collect)[1:-1]}{self._pts}>'

    def _print(self):
        return self._o + ' '.join(c._print() for c in self.collect) + self._c


# walk


class Walk:

    _type_funs = (
        (List, 'listp'),
        (Vector, 'vector'),
        (Map, 'map'),
        (String, 'string'),
        (Literal, 'literal'),
    )

    # dispatch tags are looked up here instead of by type
    _sh_funs = (
        ('#{', 'sh_set'),
    )

    def _fun(self, form):
        if isinstance(form, Dispatch):
            for tag, attr in self._sh_funs:
                if form.tag == tag:
                    return getattr(self, attr)

            raise DispatchNotImplementedError(
                f'dispatch unknown {form.tag!r} {form._where}')

        for cls, attr in self._type_funs:
            if isinstance(form, cls):
                return getattr(self, attr)

        raise UnknownFormError(f'not a form {form!r}')

    def __call__(self, form):
        # explicit stacks so that nesting depth is not limited by recursion,
        # forms with children are visited twice, once on the way down and
        # once more after their children have been walked
        done = []
        stack = [(form, None)]
        while stack:
            form, fun = stack.pop()
            if fun is None:
                fun = self._fun(form)
                if isinstance(form, ListAbstract):
                    stack.append((form, fun))
                    stack.extend((c, None) for c in reversed(form.collect))
                    continue

                wlk = fun(form)
            else:
                split = len(done) - len(form.collect)
                collect = done[split:]
                del done[split:]
                wlk = fun(form, collect)

            self._loc(wlk, form)
            if fcreadmod.debug:
                print('walk:', wlk)

            done.append(wlk)

        return done[0]

    def parse(self, forms):
        return [self(form) for form in forms]

    @staticmethod
    def _loc(wlk, form):
        return wlk._set_bounds(form._point_beg, form._point_end,
                               form._line, form._char)

    def _labst(self, form, collect, head=None):
        if head is not None:
            # the head did not come from a token, it borrows the
            # bounds of the whole form it names
            collect.insert(0, self._loc(Symbol(head), form))

        return SExpression(collect)

    def listp   (self, form, collect): return self._labst(form, collect)
    def vector  (self, form, collect): return self._labst(form, collect, 'vector')
    def map     (self, form, collect): return self._labst(form, collect, 'hash-map')
    def sh_set  (self, form, collect): return self._labst(form, collect, 'hash-set')
    def string  (self, form): return String(form)

    @staticmethod
    def _digit(char):
        # ascii only, str.isdigit alone lets in things like superscripts
        return char.isascii() and char.isdigit()

    def literal(self, form):
        v = form.value
        if self._digit(v[0]) or v[0] == '-' and self._digit(v[1:2]):
            return Number(v)

        return Symbol(v)


def parse(forms, walk_cls=Walk):
    """ forms in, expressions out """
    return walk_cls().parse(forms)


def conf_parse(tokenize, read, walk_cls=Walk):
    """ text to expressions for a given dialect """
    def parse_chars(iter_over_len_1_strings):
        walk = walk_cls()  # one per call so no state leaks between calls
        return walk.parse(read(tokenize(iter_over_len_1_strings)))

    return parse_chars


parse_string = conf_parse(tokenize, read)
parse_lines = conf_parse(tokenize_lines, read_lines)
parse_path = make_do_path(parse_lines)
