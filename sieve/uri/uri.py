# -*- coding: utf-8 -*-
r"""
sieve/uri/uri
~~~~~~~~~~~~~

Assembles a full URI out of its components::

    URI       = scheme ":" hier-part [ "?" query ] [ "#" fragment ]
    hier-part = "//" authority path-abempty
              / path-absolute
              / path-rootless
              / path-empty

For example, from RFC 3986 Section 3::

    foo://example.com:8042/over/there?name=ferret#nose
    \_/   \______________/\_________/ \_________/ \__/
     |           |            |            |        |
    scheme   authority       path        query   fragment
"""
import collections
import logging

import rfc3986

from ..common.exceptions import BadRequest
from ..common.util import split_at_next, to_bytestring
from .authority import Authority
from .path import Fragment, Path, Query
from .scheme import Scheme

log = logging.getLogger(__name__)


def _find_first(src, delimiters):
    """
    Returns the index of the first byte of ``src`` that is in
    ``delimiters``, or ``None``.
    """
    for index, byte in enumerate(src):
        if byte in delimiters:
            return index
    return None


class Uri(collections.namedtuple(
        'Uri', ['scheme', 'authority', 'path', 'query', 'fragment'])):
    """
    A parsed URI. ``authority`` is ``None`` when the URI has none; the other
    components are always present and default to empty strings.
    """
    __slots__ = ()

    def __new__(cls, scheme=Scheme(), authority=None, path=Path(),
                query=Query(), fragment=Fragment()):
        return super(Uri, cls).__new__(
            cls, scheme, authority, path, query, fragment
        )

    @classmethod
    def parse(cls, src):
        """
        Splits ``src`` into its five components and parses each in turn.

        Unlike the component parsers, empty input is rejected. An authority
        must be followed by a ``/``, ``?`` or ``#``; one that runs to the end
        of the input is rejected.

        :raises BadRequest: if ``src`` is empty or any component is
            malformed.
        """
        src = to_bytestring(src)

        if not src:
            raise BadRequest("URI must not be empty")

        split = split_at_next(src, b':')
        if split is not None:
            scheme, rest = Scheme.parse(split[0]), split[1]
        else:
            scheme, rest = Scheme(), src

        authority = None
        if rest.startswith(b'//'):
            rest = rest[2:]
            end = _find_first(rest, b'/?#')
            if end is None:
                log.debug("Rejecting URI with unterminated authority: %r", src)
                raise BadRequest("Unterminated authority: %r" % src)

            authority = Authority.parse(rest[:end])
            rest = rest[end:]

        end = _find_first(rest, b'?#')
        if end is None:
            return cls(scheme, authority, Path.parse(rest))

        path = Path.parse(rest[:end])
        delimiter, rest = rest[end:end + 1], rest[end + 1:]

        query = Query()
        if delimiter == b'?':
            split = split_at_next(rest, b'#')
            if split is None:
                return cls(scheme, authority, path, Query.parse(rest))
            query, rest = Query.parse(split[0]), split[1]

        # A second "#" cannot be escaped into a fragment, and Fragment.parse
        # rejects it.
        return cls(scheme, authority, path, query, Fragment.parse(rest))

    def to_reference(self):
        """
        Returns this URI as an ``rfc3986.URIReference``. Empty components are
        treated as absent, except that an authority with nothing after it
        keeps an empty query so the rendered text still terminates the
        authority.
        """
        query = self.query or None
        fragment = self.fragment or None

        if (self.authority is not None and not self.path and
                query is None and fragment is None):
            query = ''

        return rfc3986.URIReference(
            self.scheme or None,
            str(self.authority) if self.authority is not None else None,
            self.path,
            query,
            fragment,
        )

    def unsplit(self):
        """
        Renders the URI back to its textual form.
        """
        uri = self.to_reference().unsplit()

        # Without the colon an empty scheme would let the authority's own
        # colon be taken for the scheme separator when the text is parsed
        # again.
        if not self.scheme and ':' in uri:
            uri = ':' + uri

        return uri

    def __str__(self):
        return self.unsplit()
