from typing import *

from typeguard import TypeCheckError, check_type

from .errors import ArgTypeError

T = TypeVar('T')

def coordinate(
    items: Iterable[Any],
    conjunction: str,
    to_s: Callable[[Any], str] = str,
) -> str:
    '''Join items into an English list, with `conjunction` before the last.

    >>> coordinate(['str'], 'or')
    'str'

    >>> coordinate(['str', 'int'], 'or')
    'str or int'

    >>> coordinate(['str', 'int', 'None'], 'or')
    'str, int or None'
    '''
    strings = [to_s(item) for item in items]
    if len(strings) == 0:
        return ''
    if len(strings) == 1:
        return strings[0]
    return f"{', '.join(strings[:-1])} {conjunction} {strings[-1]}"

def type_names(expected: Any) -> List[str]:
    '''
    >>> type_names(str)
    ['str']

    >>> type_names(Optional[str])
    ['str', 'None']
    '''
    if getattr(expected, '__origin__', None) is Union:
        return [name for arg in expected.__args__ for name in type_names(arg)]
    if expected is type(None):
        return ['None']
    return [getattr(expected, '__name__', repr(expected))]

def check_arg(arg_name: str, value: T, expected: Any) -> T:
    '''Check `value` against `expected`, raising `ArgTypeError` on mismatch.

    >>> check_arg('name', 'q', str)
    'q'

    >>> check_arg('name', 1, str)
    Traceback (most recent call last):
        ...
    urlplate.errors.ArgTypeError: Expected `name` to be str, given <class 'int'>: 1
    '''
    try:
        check_type(value, expected)
    except TypeCheckError:
        # pylint: disable=raise-missing-from
        raise ArgTypeError(
            arg_name,
            coordinate(type_names(expected), 'or'),
            value,
        )
    return value

def check_fn(arg_name: str, value: T) -> T:
    if not callable(value):
        raise ArgTypeError(arg_name, 'function', value)
    return value

