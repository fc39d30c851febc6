# -*- coding: utf-8 -*-
"""
sieve/common/exceptions
~~~~~~~~~~~~~~~~~~~~~~~

Contains sieve's exceptions.
"""


class ParseError(Exception):
    """
    An invalid HTTP message component was passed to a parser.

    ``status_code`` is the HTTP status a server should answer with.
    """
    status_code = 400


class BadRequest(ParseError):
    """
    The input does not match the grammar of the component being parsed.
    """
    status_code = 400


class MethodNotImplemented(ParseError):
    """
    The request line is well formed but names a method that is not
    supported.
    """
    status_code = 501


class URITooLong(ParseError):
    """
    The request target is longer than the configured maximum.
    """
    status_code = 414


class InvalidStatusCode(ValueError):
    """
    A status code was not three ASCII digits, or is not a registered status
    code.
    """
    pass
