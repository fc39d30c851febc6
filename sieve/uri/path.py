# -*- coding: utf-8 -*-
"""
sieve/uri/path
~~~~~~~~~~~~~~

The path, query and fragment components of a URI, as defined in RFC 3986
Sections 3.3 to 3.5.
"""
from ..common.abnf import parse_pchar
from ..common.exceptions import BadRequest
from ..common.util import to_bytestring

SLASH = 0x2F


class Path(str):
    """
    A URI path, with runs of ``/`` folded into a single ``/``.

    ::

        path          = path-abempty    ; begins with "/" or is empty
                      / path-absolute   ; begins with "/" but not "//"
                      / path-noscheme   ; begins with a non-colon segment
                      / path-rootless   ; begins with a segment
                      / path-empty      ; zero characters

        path-abempty  = *( "/" segment )
        path-absolute = "/" [ segment-nz *( "/" segment ) ]
        path-rootless = segment-nz *( "/" segment )
        segment       = *pchar
        segment-nz    = 1*pchar
    """
    __slots__ = ()

    @classmethod
    def parse(cls, src):
        """
        Parses a path in one pass over ``src``.

        The first segment must not be empty, whether or not the path starts
        with ``/``, so ``//hi`` is rejected. After that a ``/`` is only added
        when the path so far lacks a trailing one, so empty segments fold
        away: ``a//b`` becomes ``a/b`` and ``hi//`` becomes ``hi/``.

        :raises BadRequest: on an empty first segment, a malformed
            percent-encoding, or any byte that is neither ``/`` nor a
            ``pchar``.
        """
        src = to_bytestring(src)

        if not src:
            return cls()
        if src == b'/':
            return cls('/')

        if src[0] == SLASH:
            path = '/'
            rest = src[1:]
        else:
            path = ''
            rest = src

        segment = parse_pchar(rest)
        if not segment:
            raise BadRequest("Path must start with a non-empty segment: %r" % src)

        path += segment
        rest = rest[len(segment):]

        while rest:
            if rest[0] != SLASH:
                raise BadRequest("Invalid path: %r" % src)

            rest = rest[1:]
            segment = parse_pchar(rest)
            if segment is None:
                raise BadRequest("Invalid path segment: %r" % src)

            if not path.endswith('/'):
                path += '/'
            path += segment
            rest = rest[len(segment):]

        return cls(path)


def _query_char(byte):
    return byte == 0x2F or byte == 0x3F


def _parse_query_or_fragment(src, kind):
    src = to_bytestring(src)
    value = parse_pchar(src, _query_char)

    if value is None or len(value) != len(src):
        raise BadRequest("Invalid %s: %r" % (kind, src))

    return value


class Query(str):
    """
    The query component of a URI.

    ``query = *( pchar / "/" / "?" )``
    """
    __slots__ = ()

    @classmethod
    def parse(cls, src):
        return cls(_parse_query_or_fragment(src, 'query'))


class Fragment(str):
    """
    The fragment component of a URI. Shares its grammar with :class:`Query`.

    ``fragment = *( pchar / "/" / "?" )``
    """
    __slots__ = ()

    @classmethod
    def parse(cls, src):
        return cls(_parse_query_or_fragment(src, 'fragment'))
