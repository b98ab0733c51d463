from collections import namedtuple
import re

BLANKS = '　をと、。'
COMMENT_OPEN = COMMENT_CLOSE = '※'
LITERAL_OPEN = '「'
LITERAL_CLOSE = '」'
DECLARATION_CHAR = 'は'
ALIAS_PARTICLE = 'と'

# Word kinds, as seen by the scanner.
COMMENT_WORD = 'comment'
LITERAL_WORD = 'literal'
DECLARATION_WORD = 'declaration'
PLAIN_WORD = 'word'

# Token kinds, in classification priority order.
NUMBER = 'NUMBER'
LITERAL = 'LITERAL'
COMMENT = 'COMMENT'
DECLARATION = 'DECLARATION'
IDENTIFIER = 'IDENTIFIER'

_BLANK_RUN = r'[\s%s]*' % BLANKS
_WORD_RUN = r'[^\s%s]+' % BLANKS
_NUMBER = re.compile(r'-?[0-9０-９]+\Z')
_FULLWIDTH_DIGITS = str.maketrans('０１２３４５６７８９', '0123456789')


Word = namedtuple('Word', 'text position kind')


class Token(namedtuple('Token', 'kind payload raw')):
    """
    A classified word. ``payload`` is an int for NUMBER tokens and the name
    for every other kind.
    """
    __slots__ = ()

    @property
    def name(self):
        if self.kind == NUMBER:
            return self.raw
        return self.payload

    @classmethod
    def classify(cls, raw):
        if _NUMBER.match(raw):
            return cls(NUMBER, parse_number(raw), raw)
        if raw.startswith(LITERAL_OPEN):
            body = raw[1:]
            if body.endswith(LITERAL_CLOSE):
                body = body[:-1]
            return cls(LITERAL, body, raw)
        if raw.startswith(COMMENT_OPEN):
            return cls(COMMENT, raw, raw)
        if raw.endswith(DECLARATION_CHAR):
            return cls(DECLARATION, raw, raw)
        return cls(IDENTIFIER, raw, raw)


def parse_number(text):
    """ Parse ASCII or full-width decimal digits, with an optional minus. """
    return int(text.translate(_FULLWIDTH_DIGITS))


class Scanner(object):
    """
    Splits source text into words, one at a time.

    The scanner is stateful: each instance is given the complete text up front
    and every call to next_word advances its position past the word returned
    (and any blanks before it). When the text is used up next_word returns
    None, and keeps doing so.

    Blanks are whitespace, the full-width space and the particles を, と, 、
    and 。, which only ever separate words. A few words are special:

    * ※comments※ and 「literals」 run up to their closing delimiter and may
      contain blanks. An unclosed one simply runs to the end of the text.
    * A lone は is a word of its own. When the particle と comes right before
      it the word becomes とは instead, so an alias declaration can be told
      apart from a plain one.

    Everything else is a maximal run of non-blank characters, which may well
    end in は (as in ``名前は``); deciding what that means is left to the
    Tokenizer.
    """
    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Consume (advancing self.pos) the characters matched by a regex applied
        at the current position. Returns the matched text, or None.
        """
        found = re.compile(pattern).match(self.text, self.pos)
        if found is None:
            return None
        self.pos = found.end()
        return found.group()

    def _delimited(self, opener, closer):
        return self._consume('%s[^%s]*%s?' % (opener, closer, closer))

    def parse_blanks(self):
        return self._consume(_BLANK_RUN)

    def parse_comment(self):
        return self._delimited(COMMENT_OPEN, COMMENT_CLOSE)

    def parse_literal(self):
        return self._delimited(LITERAL_OPEN, LITERAL_CLOSE)

    def parse_declaration(self):
        self.pos += 1
        if self.pos >= 2 and self.text[self.pos - 2] == ALIAS_PARTICLE:
            return ALIAS_PARTICLE + DECLARATION_CHAR
        return DECLARATION_CHAR

    def parse_word(self):
        return self._consume(_WORD_RUN)

    def next_word(self):
        self.parse_blanks()
        if self.is_finished:
            return None

        start = self.pos
        char = self.text[start]
        if char == COMMENT_OPEN:
            return Word(self.parse_comment(), start, COMMENT_WORD)
        elif char == LITERAL_OPEN:
            return Word(self.parse_literal(), start, LITERAL_WORD)
        elif char == DECLARATION_CHAR:
            return Word(self.parse_declaration(), start, DECLARATION_WORD)
        else:
            return Word(self.parse_word(), start, PLAIN_WORD)

    def generate(self):
        while True:
            word = self.next_word()
            if word is None:
                return
            yield word


class Tokenizer(object):
    """ Turns the words of a :class:`Scanner` into :class:`Token` objects. """
    def __init__(self, scanner):
        self.scanner = scanner

    def next_token(self):
        word = self.scanner.next_word()
        if word is None:
            return None
        return Token.classify(word.text)

    def generate(self):
        for word in self.scanner.generate():
            yield Token.classify(word.text)


def tokenize(text):
    return list(Tokenizer(Scanner(text)).generate())
