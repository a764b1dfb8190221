""" fcread tokenize, read, and parse fc notation

Usage:
    fcread tokenize [options] [<path>...]
    fcread read     [options] [<path>...]
    fcread parse    [options] [<path>...]

Options:
    -s --string=EXPR    read the expression from a string instead
    -n --notation       print results back out as notation
    -d --debug          trace every stage
"""

import sys
import pathlib
import clifn
from fcread import fcread as fcreadmod
from fcread.fcread import make_do_path, dumps, __version__
# sources given on the command line may span lines
from fcread.fcread import tokenize_lines as tokenize, read_lines as read
from fcread.walks import parse_lines as parse


def read_chars(chars):
    return read(tokenize(chars))


def readFromStdIn(stdin=None):
    from select import select
    if stdin is None:
        from sys import stdin
    if select([stdin], [], [], 0.0)[0]:
        return stdin


class Options(clifn.Options):

    @property
    def path(self):
        return [pathlib.Path(path).expanduser() for path in self._args['<path>']]


class Main(clifn.Dispatcher):

    fails = tuple()

    def default(self):
        raise NotImplementedError('oops')

    def _sources(self):
        if self.options.string is not None:
            return [('<string>', self.options.string)]
        elif self.options.path:
            return [(str(path), path) for path in self.options.path]
        else:
            stdin = readFromStdIn()
            return [] if stdin is None else [('<stdin>', stdin)]

    def _run(self, do, notation=True):
        fcreadmod.debug = self.options.debug
        do_path = make_do_path(do)

        results, fails = [], []
        for name, source in self._sources():
            try:
                if isinstance(source, str):
                    result = do(source)
                else:
                    result = do_path(source)
            except SyntaxError as e:
                fails.append((name, e))
                print(f'{name}: {e}', file=sys.stderr)
                continue

            results.append(result)
            if notation and self.options.notation:
                print(dumps(result))
            else:
                print(result)

        self.fails = fails
        return results

    def tokenize(self):
        # tokens are already notation
        return self._run(tokenize, notation=False)

    def read(self):
        return self._run(read_chars)

    def parse(self):
        return self._run(parse)


def main():
    options, *ad = Options.setup(__doc__, version='fcread ' + __version__)

    main = Main(options)

    if main.options.debug:
        print(main.options)

    main()
    if main.fails:
        sys.exit(1)


if __name__ == '__main__':
    main()
