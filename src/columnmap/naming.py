"""
Identifier conversion for generated type names.
"""
import re

__all__ = ['camelize']

_SEPARATORS = re.compile(r'[\W_]+')


def camelize(identifier: str) -> str:
    """Convert a catalog identifier such as `order_status` into `OrderStatus`.

    Segments are split on any run of non-alphanumeric characters. Only the
    first character of each segment is upper-cased, so already camel-cased
    input passes through unchanged.

    >>> camelize('user_status')
    'UserStatus'
    >>> camelize('UserStatus')
    'UserStatus'
    >>> camelize('')
    ''
    """
    return ''.join(segment[0].upper() + segment[1:]
                   for segment in _SEPARATORS.split(identifier)
                   if segment)
