from functools import wraps


class Base26Error(Exception):
    pass


class InvalidArgument(Base26Error, ValueError):
    pass


class UnbalancedParentheses(Base26Error):
    pass


class InvalidExpression(Base26Error):
    pass


class DivisionByZero(Base26Error, ZeroDivisionError):
    pass


class UnknownOperator(Base26Error):
    pass


class LimitExceeded(Base26Error):
    '''
    A configured resource limit (exponent, token count) was exceeded.
    '''
    pass


# Integers wider than this are summarised in messages instead of printed.
MAX_MESSAGE_BITS = 256


def brief(value):
    '''
    Return value, or a short description of it if it is a very wide integer.

    Python refuses to convert integers of more than a few thousand digits to
    strings, and long messages are of no use anyway.
    '''
    if isinstance(value, int) and value.bit_length() > MAX_MESSAGE_BITS:
        return '<{}-bit integer>'.format(value.bit_length())
    return value


def wrap_user_errors(fmt):
    '''
    Decorator that converts unexpected exceptions to Base26Errors.

    Passes through Base26Errors. Wide integer arguments are shortened with
    brief() before being formatted into the message.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except Base26Error:
                raise
            except Exception as e:
                raise Base26Error(fmt.format(*map(brief, args),
                                             **{key: brief(value)
                                                for key, value
                                                in kwargs.items()}), e)
        return wrapper
    return decorator
