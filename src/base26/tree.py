'''
Expression trees: value leaves and binary operations, built from postfix.
'''

import operator

from .numeral import parse_base26
from .util import (DivisionByZero, InvalidArgument, InvalidExpression,
                   LimitExceeded, UnknownOperator, wrap_user_errors)


# Exponents are narrowed to a signed 32-bit integer before raising.
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def _truncdiv(left, right):
    '''
    Integer division rounding toward zero, rather than Python's floor.
    '''
    if right == 0:
        raise DivisionByZero('Division by zero')
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _truncmod(left, right):
    '''
    Remainder of truncating division; takes the sign of the dividend.
    '''
    if right == 0:
        raise DivisionByZero('Modulo by zero')
    return left - right * _truncdiv(left, right)


def _pow(left, right, max_exponent=None):
    if not INT32_MIN <= right <= INT32_MAX:
        raise InvalidArgument('Exponent of {} bits is out of range'
                              .format(right.bit_length()))
    if right < 0:
        raise InvalidArgument('Exponent {} is negative'.format(right))
    if max_exponent is not None and right > max_exponent:
        raise LimitExceeded('Exponent {} exceeds limit of {}'
                            .format(right, max_exponent))
    return operator.__pow__(left, right)


# Arithmetic operators on the values of two subtrees.
OPERATORS = {
    '+': operator.__add__,
    '-': operator.__sub__,
    '*': operator.__mul__,
    '/': _truncdiv,
    '%': _truncmod,
    '^': _pow,
}


@wrap_user_errors('Cannot compute {1} {0} {2}')
def apply(symbol, left, right, max_exponent=None):
    '''
    Apply the operator named by symbol to two integers.
    '''
    try:
        f = OPERATORS[symbol]
    except KeyError:
        raise UnknownOperator('Unknown operator: {}'.format(symbol)) from None
    if f is _pow:
        return f(left, right, max_exponent)
    return f(left, right)


class Node:
    '''
    Expression tree node. Immutable once built.
    '''
    __slots__ = ()

    BRANCH = '+-- '
    # Indentation under a node, depending on whether it is its parent's last
    # child.
    CONTINUATION = {True: '    ', False: '|   '}

    label = None
    children = ()

    def evaluate(self, max_exponent=None):
        raise NotImplementedError

    def render(self, indent='', last=True):
        '''
        Return the lines of an indented drawing of this subtree.

        Iterative, as trees can be deeper than the recursion limit.
        '''
        lines = []
        stack = [(self, indent, last)]
        while stack:
            node, indent, last = stack.pop()
            lines.append(indent + node.BRANCH + node.label)
            if node.children:
                left, right = node.children
                indent += node.CONTINUATION[last]
                # Left is drawn first, so pushed last.
                stack.append((right, indent, True))
                stack.append((left, indent, False))
        return lines


class ValueNode(Node):
    '''
    Leaf holding a base 26 numeral, parsed on construction.
    '''
    __slots__ = ('numeral', 'value')

    def __init__(self, numeral):
        self.numeral = numeral
        self.value = parse_base26(numeral)

    @property
    def label(self):
        return self.numeral

    def evaluate(self, max_exponent=None):
        return self.value

    def __repr__(self):
        return 'ValueNode({!r})'.format(self.numeral)


class BinaryOperationNode(Node):
    '''
    Operator applied to exclusively owned left and right subtrees.
    '''
    __slots__ = ('operator', 'left', 'right')

    def __init__(self, operator, left, right):
        self.operator = operator
        self.left = left
        self.right = right

    @property
    def label(self):
        return self.operator

    @property
    def children(self):
        return self.left, self.right

    def evaluate(self, max_exponent=None):
        '''
        Evaluate left subtree, then right, then apply the operator.

        Post-order walk with an explicit stack rather than recursion, so
        expressions of any length evaluate.

        :param max_exponent: Optional limit on the exponent of ^.
        '''
        values = []
        stack = [(self, False)]
        while stack:
            node, operands_done = stack.pop()
            if not node.children:
                values.append(node.evaluate(max_exponent))
            elif operands_done:
                right = values.pop()
                left = values.pop()
                values.append(apply(node.operator, left, right, max_exponent))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        return values.pop()

    def __repr__(self):
        # Shallow; subtrees may be arbitrarily deep.
        return '<BinaryOperationNode {!r}>'.format(self.operator)


def build_tree(postfix):
    '''
    Build an expression tree from tokens in postfix order; return its root.
    '''
    stack = []
    for token in postfix:
        if token.kind == 'numeral':
            stack.append(ValueNode(token.text))
        else:
            if len(stack) < 2:
                raise InvalidExpression('Invalid expression: operator {} '
                                        'lacks operands'.format(token.text))
            right = stack.pop()
            left = stack.pop()
            stack.append(BinaryOperationNode(token.text, left, right))
    if len(stack) != 1:
        raise InvalidExpression('Invalid expression: too many operands or '
                                'operators')
    return stack.pop()
