"""
Implements a kotoba machine: a small Forth-like interpreter whose words are
written in Japanese.

Source text is scanned into words, words become tokens, and the machine runs
the tokens one at a time: literals and numbers go on the stack, names are
looked up in the dictionary and run, and a declaration (は) switches the
machine into compiling a new word until です:

    >>> m = kotoba.Machine()
    >>> kotoba.install(m)
    >>> m.run('「倍」は 2 足す です 3 倍 書く')
    5

The machine may also be fed text a line at a time, console style:
    >>> m.eval('「三」は 3')
    ' compiled'
    >>> m.eval('です 三 書く')
    3 ok

Wherein the return value is the response a console would print after the
line.
"""
from kotoba.machine import *
from kotoba.parser import Scanner, Tokenizer, Token, Word
from kotoba.natives import install
