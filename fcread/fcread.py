# tokenize
# read
# walk (see walks.py)

__version__ = '0.1.0'

from json import dumps as json_dumps

debug = False


class FcreadError(Exception): pass
class UnknownFormError(FcreadError): pass
class DispatchNotImplementedError(FcreadError, SyntaxError): pass


def make_do_path(do, chunksize=4096):
    """ wrap a function over chars so that it accepts a path or an open
    text stream, the chars are fed lazily one chunk at a time """
    def do_path(path_or_fd):
        if hasattr(path_or_fd, 'read'):  # stdin probably
            def path_gen():
                f = path_or_fd
                while True:
                    data = f.read(chunksize)
                    if not data:
                        break
                    yield from data
        else:
            def path_gen():
                with open(path_or_fd, 'rt') as f:
                    while True:
                        data = f.read(chunksize)
                        if not data:
                            break
                        yield from data

        return do(path_gen())

    return do_path


def where(point, line=None, char=None):
    """ where something went wrong, for error messages """
    if line is None:
        return f'at token {point}'

    return f'at token {point} line {line} char {char}'


def dumps(nodes):
    """ print a forest of forms or expressions back out as notation """
    return ' '.join(node._print() for node in nodes)


class _m:
    """ helper methods"""

    def eq_value(self, other):
        return type(self) == type(other) and self.value == other.value

    def eq_collect(self, other):
        return type(self) == type(other) and self.collect == other.collect

    def eq_tag_collect(self, other):
        return (type(self) == type(other) and
                self.tag == other.tag and
                self.collect == other.collect)


# abstract syntax tree node types

class Ast:

    # token indices, inclusive on both ends
    _point_beg = None
    _point_end = None
    # line and char of the first token, counted from 1, when known
    _line = None
    _char = None

    def _set_bounds(self, beg=None, end=None, line=None, char=None):
        self._point_beg = beg
        self._point_end = end
        self._line = line
        self._char = char
        return self

    @property
    def _where(self):
        return where(self._point_beg, self._line, self._char)

    @property
    def _pts(self):
        return f' ::{self._point_beg}:{self._point_end}' if debug else ''

    def __repr__(self):
        return f'<{self.__class__.__name__[:2]} {self.value}{self._pts}>'

    def __hash__(self):
        return hash((self.__class__, self.value))

    def _print(self):
        raise NotImplementedError(f'no printer for {self.__class__.__name__}')


class Leaf(Ast):
    """ A single token worth of text. """

    __eq__ = _m.eq_value
    __hash__ = Ast.__hash__  # defining __eq__ drops the inherited hash

    def __init__(self, value):
        self.value = value

    def _print(self):
        return self.value


class Literal(Leaf):
    """ Numbers, symbols, keywords, and more.
        These are left uninterpreted until walk. """


class String(str, Ast):
    """ Ast for plain strings so that we can
        do things like track start/end """

    _q = '"'

    @property
    def value(self):
        return str(self)

    def __repr__(self):
        return json_dumps(self) + self._pts

    def _print(self):
        # no escapes exist in the notation so this is only
        # reversible when the string holds no quote token
        return self._q + self + self._q


class ListAbstract(Ast):

    __eq__ = _m.eq_collect
    __hash__ = None

    @classmethod
    def from_elements(cls, *elements):
        return cls(list(elements))

    def __init__(self, collect):
        self.collect = collect

    def __repr__(self):
        return f'<{self._o} {repr(self.collect)[1:-1]} {self._c}{self._pts}>'

    @property
    def value(self):
        return self.collect

    def _print(self):
        return self._o + ' '.join(c._print() for c in self.collect) + self._c


class List(ListAbstract):
    _o, _c = '()'


class Vector(ListAbstract):
    _o, _c = '[]'


class Map(ListAbstract):
    _o, _c = '{}'


class Dispatch(ListAbstract):
    """ Sharp! Hash! Octothorp! The tag is kept verbatim including the
        char glued onto its end. Only tags that end in an opener have
        children, _c is the closer they were read up to. """

    __eq__ = _m.eq_tag_collect

    @classmethod
    def from_elements(cls, tag, *elements, closer=None):
        return cls(tag, list(elements), closer)

    def __init__(self, tag, collect=None, closer=None):
        self.tag = tag
        self.collect = [] if collect is None else collect
        self._c = closer

    def __repr__(self):
        if self._c is None:
            return f'<{self.tag}{self._pts}>'

        return f'<{self.tag} {repr(self.collect)[1:-1]} {self._c}{self._pts}>'

    def _print(self):
        if self._c is None:
            return self.tag

        return self.tag + ' '.join(c._print() for c in self.collect) + self._c


# tokens

class Token(str):
    """ A str that remembers the line and char it started on. """

    line = None
    char = None

    def __new__(cls, value, line=None, char=None):
        self = super().__new__(cls, value)
        self.line = line
        self.char = char
        return self


def token_at(token):
    """ line and char of a token, plain str tokens have neither """
    return getattr(token, 'line', None), getattr(token, 'char', None)


toks_fc = {
    't_space':       ' ',
    't_beg_list_p':  '(',
    't_end_list_p':  ')',
    't_beg_list_s':  '[',
    't_end_list_s':  ']',
    't_beg_list_c':  '{',
    't_end_list_c':  '}',
    't_beg_end_str': '"',
    't_to_sharp':    '#',
}

# dialect configuration

conf_fc = {
    'additional_whitespace': ',',  # commas are noise between elements
    **toks_fc,
}

conf_lines = {
    # sources that span lines, files and stdin
    **conf_fc,
    'additional_whitespace': ',\n\t\r',
    't_to_comment':          ';',
    't_to_hcom_in_shrp':     '!',  # #! header lines
}


# configure the tokenizer and reader

def configure(additional_whitespace='',
              t_space=' ',
              t_beg_list_p='(',
              t_end_list_p=')',
              t_beg_list_s='[',
              t_end_list_s=']',
              t_beg_list_c='{',
              t_end_list_c='}',
              t_beg_end_str='"',
              t_to_sharp='#',
              t_newline='\n',
              t_to_comment=None,
              t_to_hcom_in_shrp=None,):
    """ returns the tokenize and read functions for a dialect

    comments are off unless t_to_comment is set, they run to the end
    of the line and are ignored inside strings """

    whitespace = (t_space, *additional_whitespace)
    openers = {
        t_beg_list_p: (List, t_end_list_p),
        t_beg_list_s: (Vector, t_end_list_s),
        t_beg_list_c: (Map, t_end_list_c),
    }
    closers = {
        t_end_list_p: List,
        t_end_list_s: Vector,
        t_end_list_c: Map,
    }
    delimiters = (*openers, *closers, t_beg_end_str)
    # the last char of a dispatch tag picks where its children end
    sh_closers = {
        **{o: c for o, (_, c) in openers.items()},
        t_beg_end_str: t_beg_end_str,
    }

    def context_name(outer):
        return 'top level' if outer is None else outer.__name__.lower()

    def tokenize(iter_over_len_1_strings):
        """ split text into delimiters and runs, a run that starts
            with the sharp also eats the char that stops it """
        tokens = []
        collect = None
        collect_at = None
        in_string = False
        in_comment = False
        line, col = 1, 0

        def push(value, at):
            nonlocal in_string
            tokens.append(Token(value, *at))
            if in_string:
                in_string = value != t_beg_end_str
            else:
                # plain strings and dispatch regions closed by a quote
                in_string = (value == t_beg_end_str or
                             value[:1] == t_to_sharp and value[-1:] == t_beg_end_str)

        for char in iter_over_len_1_strings:
            col += 1
            at = line, col
            if char == t_newline:
                line, col = line + 1, 0

            if in_comment:
                in_comment = char != t_newline
                continue

            commented = not in_string and char == t_to_comment
            if collect is not None:
                if (not in_string and collect == [t_to_sharp] and
                    char == t_to_hcom_in_shrp):
                    collect = None
                    in_comment = True
                    continue
                elif commented:
                    # nothing is glued onto a run that a comment stops
                    push(''.join(collect), collect_at)
                    collect = None
                elif char not in whitespace and char not in delimiters:
                    collect.append(char)
                    continue
                elif collect[0] == t_to_sharp:
                    collect.append(char)
                    push(''.join(collect), collect_at)
                    collect = None
                    continue
                else:
                    push(''.join(collect), collect_at)
                    collect = None

            if commented:
                in_comment = True
            elif char in whitespace:
                continue
            elif char in delimiters:
                push(char, at)
            else:
                collect = [char]
                collect_at = at

        if collect is not None:
            push(''.join(collect), collect_at)

        if debug:
            print('tok:', tokens)

        return tokens

    def read_tokens(tokens, offset):
        point = 0

        def where_at(i):
            return where(offset + i, *token_at(tokens[i]))

        def read_level(outer):
            nonlocal point
            result = []
            while point < len(tokens):
                point_beg = point
                token = tokens[point]
                point += 1

                if token in openers:
                    cls, closer = openers[token]
                    collect = read_level(cls)
                    if point >= len(tokens) or tokens[point] != closer:
                        raise SyntaxError(
                            f'read error: unmatched open {context_name(cls)} '
                            f'{token!r} {where_at(point_beg)}')

                    point += 1
                    form = cls(collect)

                elif token == t_beg_end_str:
                    collect = []
                    while point < len(tokens) and tokens[point] != t_beg_end_str:
                        collect.append(tokens[point])
                        point += 1

                    if point >= len(tokens):
                        raise SyntaxError(
                            'read error: unmatched open string '
                            f'{where_at(point_beg)}')

                    point += 1
                    form = String(''.join(collect))

                elif token[:1] == t_to_sharp:
                    closer = sh_closers.get(token[-1])
                    if closer is None:
                        form = Dispatch(str(token))
                    else:
                        try:
                            stop = tokens.index(closer, point)
                        except ValueError:
                            raise SyntaxError(
                                'read error: unmatched dispatch closing token '
                                f'{closer!r} for {token!r} '
                                f'{where_at(point_beg)}') from None

                        # the region is read on its own, nesting inside it
                        # is not counted when looking for the closer
                        collect = read_tokens(tokens[point:stop], offset + point)
                        point = stop + 1
                        form = Dispatch(str(token), collect, closer)

                elif token in closers:
                    if closers[token] is outer:
                        # leave the closer for the level that opened it
                        point -= 1
                        return result

                    raise SyntaxError(
                        f'read error: unmatched closing token {token!r} '
                        f'in {context_name(outer)} {where_at(point_beg)}')

                else:
                    form = Literal(str(token))

                form._set_bounds(offset + point_beg, offset + point - 1,
                                 *token_at(tokens[point_beg]))
                if debug:
                    print('read:', form)

                result.append(form)

            return result

        return read_level(None)

    def read(tokens):
        """ build the forest of forms, fails on the first defect """
        return read_tokens(tuple(tokens), 0)

    return tokenize, read


tokenize, read = configure(**conf_fc)
tokenize_lines, read_lines = configure(**conf_lines)


def read_string(chars):
    return read(tokenize(chars))
