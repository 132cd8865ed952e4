'''
Shunting-yard tests
'''

from base26.lexer import tokenize
from base26.postfix import to_postfix, format_postfix, precedence
from base26.util import UnbalancedParentheses

from pytest import raises, mark


def postfix(expression):
    return format_postfix(to_postfix(tokenize(expression)))


def test_precedence():
    assert postfix('2+3*4') == '2 3 4 * +'
    assert postfix('2*3+4') == '2 3 * 4 +'


def test_left_associative():
    assert postfix('1-2-3') == '1 2 - 3 -'
    assert postfix('8/4%3') == '8 4 / 3 %'


def test_power_left_associative():
    assert postfix('2^3^2') == '2 3 ^ 2 ^'


def test_power_binds_tightest():
    assert postfix('2*3^2') == '2 3 2 ^ *'


def test_parentheses():
    assert postfix('(2+3)*4') == '2 3 + 4 *'
    assert postfix('((A))') == 'A'


@mark.parametrize('expression', ['(2+3', '2+3)', ')', '(', '((1)'])
def test_unbalanced(expression):
    with raises(UnbalancedParentheses):
        to_postfix(tokenize(expression))


def test_unknown_operator_lowest_precedence():
    assert precedence(tokenize('@')[0]) == 0
    assert postfix('2+3@4') == '2 3 + 4 @'


def test_empty():
    assert to_postfix([]) == []


def test_unknown_operator_pops_open_parenthesis():
    # Precedence 0 is not greater than the open parenthesis', so ( is
    # moved to the output.
    assert postfix('(2@3') == '2 ( 3 @'


def test_unknown_operator_inside_parentheses():
    with raises(UnbalancedParentheses):
        to_postfix(tokenize('(2@3)'))


def test_long_expression():
    tokens = tokenize('+'.join(['1'] * 5000))
    assert len(to_postfix(tokens)) == len(tokens)
