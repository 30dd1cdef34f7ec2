"""
Implements a postfix (reverse Polish) calculator: a lexer turning text into
tokens, and a stack machine reducing those tokens to a stack of numbers.

Usage should be as simple as:
    >>> import rpn
    >>> rpn.calculate("3 4 +")
    (7.0,)

For something that answers the way an interactive prompt would:
    >>> c = rpn.Calculator()
    >>> c.eval("5 1 2 + 4 * + 3 -")
    '14.0 ok'

Wherein the return value is the final stack (top of stack last) followed by
' ok', or ' ? ' and a description of whatever went wrong.

The machine never mutates a state it was given: every step hands back a
fresh :class:`rpn.State`, so intermediate states may be kept around and
compared at leisure (see :func:`rpn.states`).
"""
from rpn.errors import *
from rpn.lexer import *
from rpn.machine import *
