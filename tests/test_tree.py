'''
Expression tree tests
'''

from base26.lexer import Token
from base26.tree import (ValueNode, BinaryOperationNode, build_tree, apply,
                         INT32_MAX)
from base26.util import (InvalidArgument, InvalidExpression, DivisionByZero,
                         UnknownOperator, LimitExceeded)

from pytest import raises, mark


def n(text):
    return Token('numeral', text)


def op(text):
    return Token('operator', text)


def test_value_node_parses_eagerly():
    node = ValueNode('10')
    assert node.value == 26
    assert node.evaluate() == 26
    with raises(InvalidArgument):
        ValueNode('1!')


@mark.parametrize('symbol, left, right, expected', [
    ('+', 10, 11, 21),
    ('-', 1, 2, -1),
    ('*', 26, 26, 676),
    ('/', 7, 2, 3),
    ('/', -7, 2, -3),
    ('/', 7, -2, -3),
    ('%', 7, 3, 1),
    ('%', -7, 3, -1),
    ('%', 7, -3, 1),
    ('^', 2, 10, 1024),
    ('^', 5, 0, 1),
])
def test_apply(symbol, left, right, expected):
    assert apply(symbol, left, right) == expected


def test_division_by_zero():
    with raises(DivisionByZero):
        apply('/', 5, 0)
    with raises(DivisionByZero):
        apply('%', 5, 0)


def test_division_by_zero_is_zero_division_error():
    with raises(ZeroDivisionError):
        apply('/', 1, 0)


def test_exponent_out_of_range():
    with raises(InvalidArgument, match='out of range'):
        apply('^', 2, INT32_MAX + 1)
    with raises(InvalidArgument, match='negative'):
        apply('^', 2, -1)


def test_exponent_limit():
    assert apply('^', 2, 8, 8) == 256
    with raises(LimitExceeded):
        apply('^', 2, 9, 8)


def test_unknown_operator():
    with raises(UnknownOperator, match='@'):
        apply('@', 1, 2)


def test_build_tree():
    tree = build_tree([n('2'), n('3'), n('4'), op('*'), op('+')])
    assert isinstance(tree, BinaryOperationNode)
    assert tree.operator == '+'
    assert tree.left.numeral == '2'
    assert tree.right.operator == '*'
    assert tree.evaluate() == 14


def test_build_tree_left_operand_popped_second():
    tree = build_tree([n('9'), n('2'), op('-')])
    assert tree.left.numeral == '9'
    assert tree.evaluate() == 7


def test_build_tree_insufficient_operands():
    with raises(InvalidExpression, match='lacks operands'):
        build_tree([n('5'), op('+')])


def test_build_tree_leftover():
    with raises(InvalidExpression, match='too many'):
        build_tree([n('1'), n('2')])
    with raises(InvalidExpression):
        build_tree([])


def test_unknown_operator_fails_on_evaluation_only():
    tree = build_tree([n('2'), n('3'), op('@')])
    with raises(UnknownOperator):
        tree.evaluate()


def test_evaluation_left_before_right():
    # Left subtree's division by zero is reported before right's bad
    # exponent.
    tree = build_tree([n('1'), n('0'), op('/'), n('2'), n('0'), n('1'),
                       op('-'), op('^'), op('+')])
    with raises(DivisionByZero):
        tree.evaluate()


def test_render_leaf():
    assert ValueNode('AB').render() == ['+-- AB']


def test_render():
    tree = build_tree([n('2'), n('3'), n('4'), op('*'), op('+')])
    assert tree.render() == [
        '+-- +',
        '    +-- 2',
        '    +-- *',
        '        +-- 3',
        '        +-- 4',
    ]


def test_render_nested_left():
    tree = build_tree([n('1'), n('2'), op('-'), n('3'), op('-')])
    assert tree.render() == [
        '+-- -',
        '    +-- -',
        '    |   +-- 1',
        '    |   +-- 2',
        '    +-- 3',
    ]


def test_render_keeps_numeral_text():
    tree = build_tree([n('00A'), n('B'), op('+')])
    assert tree.render()[1] == '    +-- 00A'


def left_deep(count):
    postfix = [n('1')]
    for _ in range(count - 1):
        postfix += [n('1'), op('+')]
    return build_tree(postfix)


def test_evaluate_deep_tree():
    assert left_deep(5000).evaluate() == 5000


def test_evaluate_deep_right_tree():
    postfix = [n('1')] * 5000 + [op('*')] * 4999
    assert build_tree(postfix).evaluate() == 1


def test_render_deep_tree():
    lines = left_deep(2000).render()
    assert len(lines) == 2 * 2000 - 1
    assert lines[:3] == ['+-- +', '    +-- +', '    |   +-- +']
    assert lines[-1] == '    +-- 1'


def test_repr_deep_tree():
    assert repr(left_deep(5000)) == "<BinaryOperationNode '+'>"


def test_exponent_too_wide_to_print():
    with raises(InvalidArgument, match='bits is out of range'):
        apply('^', 2, 26 ** 5000)
