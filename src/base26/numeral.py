'''
Conversion between numerals over the 0-9A-Z alphabet and Python integers.
'''

from string import digits, ascii_uppercase

from .util import InvalidArgument, brief


ALPHABET = digits + ascii_uppercase
MIN_BASE = 2
MAX_BASE = len(ALPHABET)


def digit_value(char):
    '''
    Return the value (0-35) of a single alphabet character.
    '''
    value = ALPHABET.find(char)
    if len(char) != 1 or value < 0:
        raise InvalidArgument('Invalid character in numeral: {}'.format(char))
    return value


def digit_char(value):
    '''
    Return the alphabet character for a digit value (0-35).
    '''
    return ALPHABET[value]


def _check_base(base):
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidArgument('Base must be between {} and {}'.format(MIN_BASE,
                                                                      MAX_BASE))


def parse_base26(text):
    '''
    Parse a base 26 numeral.

    Letters past P (Q-Z, 26-35) are accepted and simply folded into the
    positional accumulation; they are not rejected as out of range.
    '''
    text = text.strip()
    if not text:
        raise InvalidArgument('Base 26 numeral cannot be empty')
    result = 0
    for char in text:
        result = result * 26 + digit_value(char)
    return result


def parse_in_base(text, base):
    '''
    Parse a numeral in any base from 2 to 36, rejecting out of range digits.
    '''
    _check_base(base)
    text = text.strip()
    if not text:
        raise InvalidArgument('Numeral cannot be empty')
    result = 0
    for char in text:
        value = digit_value(char)
        if value >= base:
            raise InvalidArgument(
                'Digit {} is out of range for base {}'.format(char, base))
        result = result * base + value
    return result


def format_in_base(value, base):
    '''
    Format a non-negative integer in any base from 2 to 36.
    '''
    _check_base(base)
    if value < 0:
        raise InvalidArgument('Cannot format negative value {}'
                              .format(brief(value)))
    if value == 0:
        return '0'
    chars = []
    while value > 0:
        value, remainder = divmod(value, base)
        chars.append(digit_char(remainder))
    return ''.join(reversed(chars))


def format_base26(value):
    if value < 0:
        raise InvalidArgument('Number cannot be negative in base 26')
    return format_in_base(value, 26)
