from collections import namedtuple
import logging
import re

from rpn.errors import LexError

log = logging.getLogger(__name__)

OPERAND = 'OPERAND'
OPERATOR = 'OPERATOR'


class Token(namedtuple('Token', 'kind value')):
    """
    A (kind, value) pair. Operands carry a float, operators carry one of the
    symbols ``+ - * /``.
    """
    __slots__ = ()

    @classmethod
    def operand(cls, value):
        return cls(OPERAND, float(value))

    @classmethod
    def operator(cls, symbol):
        return cls(OPERATOR, symbol)

    @property
    def is_operand(self):
        return self.kind == OPERAND

    @property
    def is_operator(self):
        return self.kind == OPERATOR


def _rule(pattern, construct):
    return re.compile(pattern), construct


# Tried in order; the first rule to match at the current position wins.
RULES = [
    _rule(r'\+', lambda text: [Token.operator('+')]),
    _rule(r'-', lambda text: [Token.operator('-')]),
    _rule(r'\*', lambda text: [Token.operator('*')]),
    _rule(r'/', lambda text: [Token.operator('/')]),
    _rule(r'[0-9]+', lambda text: [Token.operand(text)]),
    _rule(r'\s+', lambda text: []),
]


class Lexer(object):
    """
    Turns a string into tokens, one lexical rule at a time.

    The lexer is stateful: each instance is given the text to operate on, and
    every call to :meth:`next_tokens` advances its position within that text
    past whatever the winning rule matched. Rules are ``(regex, construct)``
    pairs; the regex is only ever matched at the current position, and
    `construct` turns the matched text into a list of zero tokens (e.g. for
    whitespace) or one.

    :meth:`next_tokens` raises :exc:`StopIteration` once the text has been
    completely consumed, and :exc:`rpn.LexError` when no rule matches.
    """
    def __init__(self, text, rules=RULES):
        self.text = text
        self.rules = rules
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Tries `pattern` right where the lexer stands. On a non-empty match the
        lexer moves past it and the matched text comes back; otherwise
        nothing moves and the answer is None.
        """
        if self.is_finished:
            raise StopIteration()
        found = pattern.match(self.text, self.pos)
        if found is None or not found.group():
            return None
        self.pos = found.end()
        return found.group()

    def next_tokens(self):
        for pattern, construct in self.rules:
            matched = self._consume(pattern)
            if matched is not None:
                return construct(matched)
        raise LexError(self.pos, self.text[self.pos])

    def generate(self):
        while not self.is_finished:
            for token in self.next_tokens():
                yield token

    def tokens(self):
        """ All the tokens in the text, or a LexError; never part of them. """
        ret = tuple(self.generate())
        log.debug('lexed %r into %d tokens', self.text, len(ret))
        return ret


def tokenize(text, rules=RULES):
    return Lexer(text, rules).tokens()
