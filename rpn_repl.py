import argparse
import logging
import readline
import sys

import rpn

PROMPT = '> '


def trace(calculator, text):
    """
    Runs `text`, then prints the input, its tokens and every stack the
    machine went through. Nothing is printed if the run fails.
    """
    tokens = calculator.tokenize(text)
    history = list(rpn.states(rpn.initial_state(tokens)))
    calculator.check(history[-1])

    print('Input:')
    print(text)
    print('Tokens:')
    print(' '.join('%s:%s' % (t.kind, t.value) for t in tokens))
    print('Stacks:')
    for state in history:
        print(list(rpn.values(state)))
    return history[-1]


def rpn_repl(calculator):
    print('Type "BYE" or input an end of file (Ctrl+D) to quit.')

    cmd = input(PROMPT)
    while cmd.strip().upper() != 'BYE':
        print(calculator.eval(cmd))
        cmd = input(PROMPT)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Evaluate postfix arithmetic.')
    parser.add_argument('expression', nargs='*',
                        help='expression to evaluate; starts a prompt if omitted')
    parser.add_argument('--strict', action='store_true',
                        help='require the expression to leave exactly one value')
    parser.add_argument('--trace', action='store_true',
                        help='print the tokens and every intermediate stack')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(name)s: %(message)s')

    calculator = rpn.Calculator(strict=args.strict)

    if not args.expression:
        try:
            rpn_repl(calculator)
        except EOFError:
            pass  # perfectly acceptable
        return 0

    text = ' '.join(args.expression)
    try:
        if args.trace:
            state = trace(calculator, text)
        else:
            state = calculator.run(text)
    except rpn.RPNError as e:
        print(rpn.ERROR_FORMAT % e, file=sys.stderr)
        return 1

    print(rpn.format_stack(state))
    return 0


if __name__ == '__main__':
    sys.exit(main())
