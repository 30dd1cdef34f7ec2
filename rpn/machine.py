from collections import namedtuple
import logging
import math
import operator

from rpn.errors import EvalError, RPNError, StackUnderflow, UnbalancedExpression
from rpn.lexer import Token, tokenize

log = logging.getLogger(__name__)

OK_SUFFIX = ' ok'
ERROR_FORMAT = ' ? %s'


def divide(a, b):
    """
    Real division, except that a zero divisor gives the IEEE-754 answer
    (infinity or NaN) rather than raising ZeroDivisionError.
    """
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


OPERATIONS = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': divide,
}


class State(namedtuple('State', 'tokens pos stack')):
    """
    A snapshot of the machine: the whole token stream, how far into it the
    machine has read, and the operand stack.

    The stack is a chain of ``(top, rest)`` pairs ending in ``()``, so a push
    or a pop shares everything underneath with the previous State and
    nothing is ever copied. Use :func:`operands` or :func:`values` for a
    flat view, top of stack last.
    """
    __slots__ = ()

    @property
    def is_finished(self):
        return self.pos >= len(self.tokens)

    @property
    def input(self):
        """ The tokens still to be read. """
        return self.tokens[self.pos:]


def initial_state(tokens):
    return State(tuple(tokens), 0, ())


def step(state):
    """
    Reads one token and returns the resulting State.

    Operands go onto the stack. Operators pop their right-hand operand, then
    their left-hand one, and push the result: ``7 2 -`` leaves 5.0.
    """
    if state.is_finished:
        raise EvalError('no input left to evaluate')

    token = state.tokens[state.pos]
    pos = state.pos + 1

    if token.is_operand:
        return State(state.tokens, pos, (token, state.stack))

    if not state.stack or not state.stack[1]:
        raise StackUnderflow(token.value)
    right, (left, rest) = state.stack
    value = OPERATIONS[token.value](left.value, right.value)
    return State(state.tokens, pos, (Token.operand(value), rest))


def states(state):
    """ Yields `state` and every state after it, until the input runs out. """
    yield state
    while not state.is_finished:
        state = step(state)
        log.debug('read token %d of %d', state.pos, len(state.tokens))
        yield state


def evaluate(state):
    """
    Runs the machine from `state` until the input is exhausted and returns
    the final State. Whatever is left on the stack (one value, several, or
    none) is the caller's business; see :func:`result` for a stricter view.
    """
    for final in states(state):
        pass
    return final


def operands(state):
    ret = []
    stack = state.stack
    while stack:
        top, stack = stack
        ret.append(top)
    ret.reverse()
    return tuple(ret)


def values(state):
    return tuple(token.value for token in operands(state))


def result(state):
    stack = state.stack
    if not stack or stack[1]:
        raise UnbalancedExpression(values(state))
    return stack[0].value


def calculate(text):
    return values(evaluate(initial_state(tokenize(text))))


def format_stack(state):
    return ' '.join(repr(v) for v in values(state)) + OK_SUFFIX


class Calculator(object):
    """
    Evaluates one line of postfix arithmetic at a time, answering the way an
    interactive prompt would (see :meth:`eval`).

    If `strict` is set, a line must reduce to exactly one value to be ok.
    """
    def __init__(self, strict=False):
        self.strict = strict
        self.last_state = None

    def tokenize(self, text):
        return tokenize(text)

    def check(self, state):
        if self.strict:
            result(state)
        return state

    def run(self, text):
        """ The final State for `text`; errors are raised, not reported. """
        return self.check(evaluate(initial_state(self.tokenize(text))))

    def eval(self, text=''):
        try:
            state = self.run(text)
        except RPNError as e:
            log.debug('error evaluating %r: %s', text, e)
            return ERROR_FORMAT % e

        self.last_state = state
        return format_stack(state)
