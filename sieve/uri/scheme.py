# -*- coding: utf-8 -*-
"""
sieve/uri/scheme
~~~~~~~~~~~~~~~~

The scheme component of a URI.
"""
from ..common.abnf import ALPHA, DIGIT
from ..common.exceptions import BadRequest
from ..common.util import to_bytestring

_SCHEME_CHARS = ALPHA | DIGIT | frozenset(b'+-.')


class Scheme(str):
    """
    Scheme of a URI as defined in RFC 3986 Section 3.1, normalized to lower
    case.

    ``scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )``
    """
    __slots__ = ()

    @classmethod
    def parse(cls, src):
        """
        Parses a scheme. Empty input is a valid, empty, scheme.

        :raises BadRequest: if the first byte is not a letter or a later byte
            is not a scheme character.
        """
        src = to_bytestring(src)

        if not src:
            return cls()

        if src[0] not in ALPHA:
            raise BadRequest("Scheme must start with a letter: %r" % src)

        if not all(b in _SCHEME_CHARS for b in src[1:]):
            raise BadRequest("Invalid scheme: %r" % src)

        return cls(src.decode('ascii').lower())
