# -*- coding: utf-8 -*-
"""
sieve/common/util
~~~~~~~~~~~~~~~~~

General utility functions for use with sieve.
"""


def to_bytestring(element):
    """
    Converts a single string or bytes-like object to a bytestring, encoding
    via UTF-8 if needed.

    ``bytearray`` and ``memoryview`` inputs are copied, so nothing built from
    the result keeps the caller's buffer alive.
    """
    if isinstance(element, str):
        return element.encode('utf-8')
    elif isinstance(element, bytes):
        return element
    elif isinstance(element, (bytearray, memoryview)):
        return bytes(element)
    else:
        raise ValueError("Non string type.")


def split_at_next(src, delimiter):
    """
    Divides ``src`` in two at the first occurrence of ``delimiter``, which is
    excluded from both halves.

    Returns ``None`` if ``delimiter`` does not occur in ``src``.

    >>> split_at_next(b'user@host', b'@')
    (b'user', b'host')
    >>> split_at_next(b'host', b'@') is None
    True
    """
    index = src.find(delimiter)
    if index == -1:
        return None

    return src[:index], src[index + len(delimiter):]


def split_at_next_space(src):
    """
    A convenience wrapper for :func:`split_at_next` with the SP byte.
    """
    return split_at_next(src, b' ')
