from collections import namedtuple
from functools import reduce
import operator

import regex


class Token(namedtuple('Token', 'kind text')):
    '''
    Lexeme of an infix expression.

    kind is one of numeral, open, close or operator.
    '''
    __slots__ = ()

    def __str__(self):
        return self.text


class Lexer:
    '''
    Lexer for the base 26 expression *regular* grammar.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # Upper case only; callers normalise case beforehand.
    NUMERAL = r'[0-9A-Z]+'
    OPEN = r'\('
    CLOSE = r'\)'
    # Anything else is a single character operator. Not validated here,
    # unknown operators are rejected on evaluation.
    OPERATOR = r'.'
    SPACE = r'\s+'

    # All possible lexemes, tried in order.
    LEXEME = r'(?<numeral>' + NUMERAL + r')|' \
             r'(?<open>' + OPEN + r')|' \
             r'(?<close>' + CLOSE + r')|' \
             r'(?<operator>' + OPERATOR + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all tokens.

        Whitespace is dropped before scanning, so it never separates
        numerals: "1 2" is the single numeral 12.
        '''
        line = regex.sub(type(self).SPACE, '', line, flags=type(self).FLAGS)
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            yield self.token(match)
            line = line[len(match.group(0)):]

    def token(self, match):
        '''
        Build the token for a lexeme match.
        '''
        kind, = self.matchedgroups(match).keys()
        return Token(kind, match.group(0))

    def matchedgroups(self, match):
        '''
        Return the groups that matched, by name.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}


def tokenize(line):
    return list(Lexer().lex(line))
