class RPNError(Exception): pass


class LexError(RPNError):
    """ Nothing in the rule table matches the text at `position`. """
    def __init__(self, position, char):
        super().__init__('unrecognized character %r at position %d' % (char, position))
        self.position = position
        self.char = char


class EvalError(RPNError): pass


class StackUnderflow(EvalError):
    def __init__(self, operator):
        super().__init__('stack underflow for operator %s' % operator)
        self.operator = operator


class UnbalancedExpression(EvalError):
    """ The expression did not reduce to exactly one value. """
    def __init__(self, stack):
        super().__init__('expected exactly one value on the stack, found %d' % len(stack))
        self.stack = stack
