# -*- coding: utf-8 -*-
"""
sieve/http11/parser
~~~~~~~~~~~~~~~~~~~

This module contains sieve's HTTP/1.1 message head parser. It ties the
request line, status line and header section parsers together behind the
interface a connection needs: hand it a buffer, get back a parsed head or
``None`` if the buffer does not yet hold a complete one.
"""
import logging
from collections import namedtuple

from ..common.exceptions import BadRequest
from ..common.headers import HeaderMap
from ..common.status import StatusCode
from ..common.util import split_at_next_space, to_bytestring
from .request import URI_MAX_LENGTH, RequestLine, Version

log = logging.getLogger(__name__)

Request = namedtuple(
    'Request', ['method', 'uri', 'version', 'headers', 'consumed']
)
Response = namedtuple(
    'Response', ['status', 'reason', 'version', 'headers', 'consumed']
)

HEAD_TERMINATOR = b'\r\n\r\n'


class Parser(object):
    """
    A single HTTP/1.1 head parser.

    The parser holds only its configuration, so a single instance can be
    shared between threads.

    :param max_uri_length: (optional) The longest request target accepted by
        :meth:`parse_request`, in bytes. Defaults to 8000.
    """
    def __init__(self, max_uri_length=URI_MAX_LENGTH):
        self.max_uri_length = max_uri_length

    def parse_request(self, buffer):
        """
        Parses a single HTTP request head from a buffer.

        :param buffer: A bytes-like object holding the start of a request.
        :returns: A :class:`Request <sieve.http11.parser.Request>` object, or
            ``None`` if there is not enough data in the buffer.
        :raises ParseError: if the head is malformed.
        """
        head = self._split_head(buffer)
        if head is None:
            return None
        start_line, header_block, consumed = head

        line = RequestLine.parse(start_line, max_uri_length=self.max_uri_length)
        headers = HeaderMap.parse(header_block)

        return Request(line.method, line.uri, line.version, headers, consumed)

    def parse_response(self, buffer):
        """
        Parses a single HTTP response head from a buffer.

        ``status-line = HTTP-version SP status-code SP reason-phrase``

        :param buffer: A bytes-like object holding the start of a response.
        :returns: A :class:`Response <sieve.http11.parser.Response>` object,
            or ``None`` if there is not enough data in the buffer.
        :raises ParseError: if the head is malformed.
        :raises InvalidStatusCode: if the status code is not registered.
        """
        head = self._split_head(buffer)
        if head is None:
            return None
        start_line, header_block, consumed = head

        split = split_at_next_space(start_line)
        if split is None:
            raise BadRequest("Status line has no status code")
        version = Version.parse(split[0])

        split = split_at_next_space(split[1])
        if split is None:
            raise BadRequest("Status line has no reason phrase")
        status = StatusCode.parse(split[0])

        headers = HeaderMap.parse(header_block)

        return Response(status, split[1], version, headers, consumed)

    def _split_head(self, buffer):
        """
        Splits the head off the front of ``buffer`` into its start line and
        header block, the latter keeping the CRLF of its last line.
        """
        data = to_bytestring(buffer)

        end = data.find(HEAD_TERMINATOR)
        if end == -1:
            log.debug("Incomplete head in %d byte buffer", len(data))
            return None

        # The start line's CRLF may be the first half of the terminator when
        # there are no header fields.
        line_end = data.find(b'\r\n')
        start_line = data[:line_end]
        header_block = data[line_end + 2:end + 2]

        return start_line, header_block, end + len(HEAD_TERMINATOR)
