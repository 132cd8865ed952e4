from collections import OrderedDict

from .lexer import Lexer
from .numeral import format_base26, format_in_base
from .postfix import to_postfix
from .tree import build_tree
from .util import LimitExceeded, brief


# Bases results are reported in, in display order.
OUTPUT_BASES = (26, 10, 2, 16)


def parse_expression(expression):
    '''
    Tokenize, reorder into postfix and build the tree of an expression.
    '''
    return build_tree(to_postfix(Lexer().lex(expression)))


class Calculation:
    '''
    An evaluated expression: its tree and resulting integer.
    '''

    def __init__(self, expression, tree, value):
        self.expression = expression
        self.tree = tree
        self.value = value

    def formats(self):
        '''
        Return the value formatted in each of OUTPUT_BASES, in order.

        Fails on negative values.
        '''
        return OrderedDict((base,
                            format_base26(self.value)
                            if base == 26
                            else format_in_base(self.value, base))
                           for base
                           in OUTPUT_BASES)

    def __repr__(self):
        return 'Calculation({!r}, value={})'.format(self.expression,
                                                    brief(self.value))


class Calculator:
    '''
    Base 26 expression calculator.

    Every expression is parsed and evaluated independently; nothing is kept
    between calls.
    '''

    # No limits by default; arithmetic is bounded only by memory.
    DEFAULT_MAX_EXPONENT = None
    DEFAULT_MAX_TOKENS = None

    def __init__(self, max_exponent=None, max_tokens=None):
        '''
        Create calculator.

        :param max_exponent: Largest exponent ^ may raise to.
        :param max_tokens: Largest number of tokens in an expression.
        '''
        self.max_exponent = (type(self).DEFAULT_MAX_EXPONENT
                             if max_exponent is None
                             else max_exponent)
        self.max_tokens = (type(self).DEFAULT_MAX_TOKENS
                           if max_tokens is None
                           else max_tokens)
        self.lexer = Lexer()

    def tokenize(self, expression):
        '''
        Return tokens of the case-normalised expression, enforcing limits.
        '''
        tokens = list(self.lexer.lex(expression.upper()))
        if self.max_tokens is not None and len(tokens) > self.max_tokens:
            raise LimitExceeded('Expression has {} tokens, limit is {}'
                                .format(len(tokens), self.max_tokens))
        return tokens

    def parse(self, expression):
        return build_tree(to_postfix(self.tokenize(expression)))

    def calculate(self, expression):
        '''
        Parse and evaluate expression.
        '''
        return self.evaluate(expression, self.parse(expression))

    def evaluate(self, expression, tree):
        '''
        Evaluate a tree previously returned by parse() for expression.
        '''
        return Calculation(expression, tree, tree.evaluate(self.max_exponent))
