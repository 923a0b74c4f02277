from functools import wraps


class ClackyError(Exception):
    pass


class DivisionByZero(ClackyError, ZeroDivisionError):
    '''
    A fraction would end up with a zero denominator.
    '''


class InvalidFormat(ClackyError, ValueError):
    '''
    Word is neither a known command nor a numeric literal.
    '''


class EmptyStack(ClackyError):
    '''
    Not enough elements on the stack for the operation.
    '''


class IndexOutOfRange(ClackyError, IndexError):
    pass


class StorageError(ClackyError):
    pass


class NegativeRegisterNumber(StorageError):
    pass


class StorageFailure(StorageError):
    pass


def wrap_user_errors(fmt, error=ClackyError):
    '''
    Ugly hack decorator that converts unexpected exceptions to ClackyErrors.

    Passes through ClackyErrors. fmt is formatted with the call's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except ClackyError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
