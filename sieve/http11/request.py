# -*- coding: utf-8 -*-
"""
sieve/http11/request
~~~~~~~~~~~~~~~~~~~~

Parsers for the request line of an HTTP/1.1 request, as defined in RFC 7230
Section 3.1.1::

    request-line = method SP request-target SP HTTP-version
"""
import collections
import logging
from enum import Enum

from ..common.exceptions import BadRequest, MethodNotImplemented, URITooLong
from ..common.util import split_at_next_space, to_bytestring
from ..uri.uri import Uri

log = logging.getLogger(__name__)

#: The longest request target accepted by default, in bytes.
URI_MAX_LENGTH = 8000


class Method(Enum):
    """
    The request methods of RFC 7231 Section 4.
    """
    GET = 'GET'
    HEAD = 'HEAD'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'
    CONNECT = 'CONNECT'
    OPTIONS = 'OPTIONS'
    TRACE = 'TRACE'

    @classmethod
    def parse(cls, src):
        """
        Method tokens are case-sensitive.

        :raises MethodNotImplemented: if ``src`` is not one of the methods
            above.
        """
        src = to_bytestring(src)

        try:
            return _METHODS[src]
        except KeyError:
            raise MethodNotImplemented("Unsupported method: %r" % src)

    def __bytes__(self):
        return self.value.encode('ascii')


_METHODS = dict((m.value.encode('ascii'), m) for m in Method)


class Version(collections.namedtuple('Version', ['major', 'minor'])):
    """
    An HTTP protocol version, as defined in RFC 7230 Section 2.6.

    ``HTTP-version = "HTTP/" DIGIT "." DIGIT``

    Any single-digit major and minor version is syntactically valid; it is
    up to the caller to decide which versions it supports.
    """
    __slots__ = ()

    @classmethod
    def parse(cls, src):
        """
        :raises BadRequest: if ``src`` is not exactly ``HTTP/x.y``.
        """
        src = to_bytestring(src)

        if (len(src) != 8 or not src.startswith(b'HTTP/') or
                src[6] != 0x2E or
                not 0x30 <= src[5] <= 0x39 or
                not 0x30 <= src[7] <= 0x39):
            raise BadRequest("Invalid HTTP version: %r" % src)

        return cls(src[5] - 0x30, src[7] - 0x30)

    def __bytes__(self):
        return b'HTTP/%d.%d' % (self.major, self.minor)


class RequestLine(collections.namedtuple(
        'RequestLine', ['method', 'uri', 'version'])):
    """
    A parsed request line: a :class:`Method`, a
    :class:`Uri <sieve.uri.uri.Uri>` and a :class:`Version`.
    """
    __slots__ = ()

    @classmethod
    def parse(cls, src, max_uri_length=URI_MAX_LENGTH):
        """
        Parses a request line, without its trailing CRLF.

        :param src: The request line.
        :param max_uri_length: (optional) The longest request target to
            accept, in bytes. Defaults to :data:`URI_MAX_LENGTH`.
        :raises BadRequest: if the line is malformed.
        :raises MethodNotImplemented: if the method is not supported.
        :raises URITooLong: if the request target is longer than
            ``max_uri_length``. This is checked before the target is parsed.
        """
        src = to_bytestring(src)

        split = split_at_next_space(src)
        if split is None:
            raise BadRequest("Request line has no request target")
        method = Method.parse(split[0])

        split = split_at_next_space(split[1])
        if split is None:
            raise BadRequest("Request line has no HTTP version")
        target, rest = split

        if len(target) > max_uri_length:
            log.debug(
                "Rejecting request target of %d bytes (limit %d)",
                len(target), max_uri_length
            )
            raise URITooLong(
                "Request target is %d bytes long" % len(target)
            )

        return cls(method, Uri.parse(target), Version.parse(rest))

    def to_bytes(self):
        """
        Serializes the request line, without a trailing CRLF.
        """
        return b' '.join([
            bytes(self.method),
            self.uri.unsplit().encode('ascii'),
            bytes(self.version),
        ])
