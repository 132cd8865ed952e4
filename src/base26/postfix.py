'''
Infix to postfix (RPN) conversion, by shunting-yard.
'''

from .util import UnbalancedParentheses


PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '%': 2,
    '^': 3,
}


def precedence(token):
    '''
    Return binding strength of an operator token; 0 for anything unknown.
    '''
    return PRECEDENCE.get(token.text, 0)


def to_postfix(tokens):
    '''
    Reorder infix tokens into postfix order.

    Operators of equal precedence are left-associative, ^ included, so
    2^3^2 is (2^3)^2.
    '''
    output = []
    operators = []
    for token in tokens:
        if token.kind == 'numeral':
            output.append(token)
        elif token.kind == 'open':
            operators.append(token)
        elif token.kind == 'close':
            while operators and operators[-1].kind != 'open':
                output.append(operators.pop())
            if not operators:
                raise UnbalancedParentheses('Unbalanced parentheses')
            operators.pop()
        else:
            # Unknown operators have precedence 0 and so pop everything,
            # open parentheses included.
            while operators and precedence(operators[-1]) >= precedence(token):
                output.append(operators.pop())
            operators.append(token)

    while operators:
        if operators[-1].kind in {'open', 'close'}:
            raise UnbalancedParentheses('Unbalanced parentheses')
        output.append(operators.pop())
    return output


def format_postfix(tokens):
    return ' '.join(map(str, tokens))
