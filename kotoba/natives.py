"""
The built-in words every program starts with.

    >>> m = kotoba.Machine()
    >>> kotoba.install(m)
    >>> m.run('「こんにちは」書く')
    こんにちは

Values on the stack are either int or str. Words wanting one or the other
check for it and raise :exc:`TypeMismatch` instead of converting; the only
conversion anywhere is 繋ぐ rendering integers as decimal text.
"""
import inspect
import io
import logging
import sys

from kotoba.machine import EmptyStackAccess, SourceUnreadable, TypeMismatch
from kotoba.parser import Token, IDENTIFIER

logger = logging.getLogger(__name__)


def _word(name):
    """
    Creates a decorator that adds a .word member to its given func, which is
    looked for by :func:`install` when registering the natives of a
    :class:`Natives` instance.
    """
    def decorator(func):
        func.word = name
        return func
    return decorator


def _integer(value):
    # bool is an int subclass but never a stack value
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeMismatch('expected an integer, got %r' % (value,))
    return value


def _text(value):
    if not isinstance(value, str):
        raise TypeMismatch('expected text, got %r' % (value,))
    return value


class Natives(object):
    """ Words needing more than the stack: output, files, the machine. """
    def __init__(self, machine, out, encoding):
        self.machine = machine
        self.out = out
        self.encoding = encoding

    @_word('書く')
    def write(self):
        self.out.write('%s' % (self.machine.pop(),))

    @_word('改行')
    def newline(self):
        self.out.write('\n')

    @_word('実行')
    def run_value(self):
        name = _text(self.machine.pop())
        self.machine.execute(Token(IDENTIFIER, name, name))

    @_word('深さ')
    def depth(self):
        self.machine.push(len(self.machine.data_stack))

    @_word('複製')
    def dup_bottom(self):
        stack = self.machine.data_stack
        if not stack:
            raise EmptyStackAccess()
        self.machine.push(stack[0])

    @_word('反転')
    def negate_bottom(self):
        stack = self.machine.data_stack
        if not stack:
            raise EmptyStackAccess()
        stack[0] = -_integer(stack[0])

    @_word('読み込む')
    def load(self):
        path = _text(self.machine.pop())
        logger.debug('loading %s', path)
        self.machine.run(read_source(path, self.encoding))


def read_source(path, encoding):
    """ Reads a whole source file, raising :exc:`SourceUnreadable` on failure. """
    try:
        with io.open(path, encoding=encoding) as source:
            return source.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable('cannot read %s: %s' % (path, e))


def install(machine, out=None, encoding='utf-8'):
    """
    Seeds `machine` with the built-in words. Output goes to `out`, standard
    output by default; `encoding` is used by 読み込む to read source files.
    """
    natives = Natives(machine, out if out is not None else sys.stdout,
                      encoding)
    for name, method in inspect.getmembers(natives, inspect.ismethod):
        if hasattr(method, 'word'):
            machine.define_native(method.word, method)

    machine.add_stackmethod('繋ぐ', lambda b, a: '%s%s' % (a, b))
    machine.add_stackmethod('零か', lambda a: int(_integer(a) == 0))
    machine.add_stackmethod('足す', lambda b, a: _integer(a) + _integer(b))
    return natives
