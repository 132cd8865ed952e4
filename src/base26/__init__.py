'''
Base 26 calculator.

Evaluates arithmetic expressions over arbitrary precision base 26 numerals
(digits 0-9 then A-Z) with + - * / % ^ and parentheses, and reports the
result in bases 26, 10, 2 and 16, along with a drawing of the expression
tree.

Expressions go through a lexer, a shunting-yard conversion to postfix, and
are built into a tree which is then evaluated.
'''

from .cli import CLI
from .lexer import Lexer, Token
from .calculator import Calculator, Calculation, parse_expression


__all__ = 'Calculator', 'Calculation', 'parse_expression', 'Lexer', 'Token', \
          'CLI'
