from collections import namedtuple
import logging

from kotoba.parser import (Scanner, Tokenizer, tokenize,
                           NUMBER, LITERAL, COMMENT, DECLARATION, IDENTIFIER)

logger = logging.getLogger(__name__)


class MachineError(Exception): pass


class UnknownName(MachineError):
    def __init__(self, name):
        super(UnknownName, self).__init__('unknown name: %s' % name)
        self.name = name


class EmptyStackAccess(MachineError):
    def __init__(self):
        super(EmptyStackAccess, self).__init__('stack underflow')


class TypeMismatch(MachineError): pass


class SourceUnreadable(MachineError): pass


class CallDepthExceeded(MachineError): pass


EXECUTING = 9900
COMPILING = 9901

END_OF_UNIT = ('です', 'である')

NativeOperation = namedtuple('NativeOperation', 'func')
CompiledProcedure = namedtuple('CompiledProcedure', 'tokens')


class Machine(object):
    """
    A stack machine with a dictionary of words, some native, some compiled
    from tokens by the running program itself.

    The machine is COMPILING whenever compile_depth is above zero. Entering a
    unit (a declaration mark, or a name registered in ``declarers``) raises
    the depth, and each です or である lowers it again and stores everything
    compiled so far under the name popped off the stack. Nested units share
    the one compile buffer, so an inner unit's procedure also holds the outer
    unit's tokens that came before it.
    """
    def __init__(self):
        self.dictionary = {}
        self.data_stack = []
        self.compile_buffer = []
        self.compile_depth = 0
        self.declarers = set()

    @property
    def mode(self):
        if self.compile_depth > 0:
            return COMPILING
        return EXECUTING

    def push(self, val):
        self.data_stack.append(val)

    def push_all(self, ls):
        self.data_stack.extend(ls)

    def pop(self):
        if self.data_stack:
            return self.data_stack.pop()
        else:
            raise EmptyStackAccess()

    def peek(self):
        if self.data_stack:
            return self.data_stack[-1]
        else:
            raise EmptyStackAccess()

    def define_native(self, name, func):
        self.dictionary[name] = NativeOperation(func)

    def define(self, name, tokens):
        logger.debug('defining %s as %d tokens', name, len(tokens))
        self.dictionary[name] = CompiledProcedure(tuple(tokens))

    def add_stackmethod(self, name, func):
        """
        Turns a given function `func` into a native word consuming the stack.

        The function gets its arguments from the stack automatically, in the
        order they pop off (so from the stack [1, 2] a two-argument function
        is called as func(2, 1)). A tuple return value is pushed element by
        element, None pushes nothing and anything else is pushed as is.
        """
        num_args = func.__code__.co_argcount

        def stack_helper():
            args = [self.pop() for _ in range(num_args)]
            ret = func(*args)
            if ret is None:
                return
            if isinstance(ret, tuple):
                self.push_all(ret)
            else:
                self.push(ret)
        self.define_native(name, stack_helper)

    def run_token(self, token):
        if self.compile_depth > 0:
            self._compile_token(token)
        elif token.kind in (LITERAL, NUMBER):
            self.push(token.payload)
        elif token.kind == COMMENT:
            pass
        elif self._is_declarer(token):
            self.compile_depth += 1
            logger.debug('compiling after %s', token.name)
        else:
            self.execute(token)

    def _is_declarer(self, token):
        return (token.kind == DECLARATION or
                (token.kind == IDENTIFIER and token.name in self.declarers))

    def _compile_token(self, token):
        if token.kind == DECLARATION:
            declarer = self.peek()
            logger.debug('%s is now a declarer', declarer)
            self.declarers.add(declarer)

        if token.kind not in (LITERAL, NUMBER) and token.name in END_OF_UNIT:
            name = self.pop()
            self.compile_depth -= 1
            self.define(name, self.compile_buffer)
            if self.compile_depth == 0:
                self.compile_buffer = []
        if token.kind == IDENTIFIER and token.name in self.declarers:
            self.compile_depth += 1

        if self.compile_depth > 0:
            self.compile_buffer.append(token)

    def execute(self, token):
        entry = self.dictionary.get(token.name)
        if entry is None:
            raise UnknownName(token.name)

        try:
            if isinstance(entry, NativeOperation):
                entry.func()
            else:
                self.interpret(entry.tokens)
        except RecursionError:
            raise CallDepthExceeded('call depth exceeded in %s' % token.name)

    def interpret(self, tokens=()):
        for token in tokens:
            self.run_token(token)

    def tokenize(self, text):
        return tokenize(text)

    def run(self, text):
        self.interpret(Tokenizer(Scanner(text)).generate())

    def eval(self, text=''):
        """
        Runs `text` the way a console would: the result is ' ok' or, if a unit
        is still open, ' compiled'. Errors come back as ' ? message' and drop
        the stack and any half-compiled unit; definitions survive.
        """
        try:
            self.run(text)
        except MachineError as e:
            self.data_stack = []
            self.compile_buffer = []
            self.compile_depth = 0
            return ' ? %s' % e

        if self.mode == EXECUTING:
            return ' ok'
        return ' compiled'
