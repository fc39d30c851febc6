# -*- coding: utf-8 -*-
"""
sieve/common/status
~~~~~~~~~~~~~~~~~~~

The registry of HTTP status codes sieve knows about, with their reason
phrases.

The codes are those defined in RFC 7231 Section 6, plus 206 and 416 from
RFC 7233 and 304 from RFC 7232:
https://tools.ietf.org/html/rfc7231#section-6
"""
from enum import IntEnum

from .exceptions import InvalidStatusCode
from .util import to_bytestring


class StatusCode(IntEnum):
    """
    A registered HTTP status code. Calling ``StatusCode(n)`` for a code not
    in the registry raises ``ValueError``; use :meth:`parse` for wire bytes.
    """
    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206

    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    TEMPORARY_REDIRECT = 307

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    PAYLOAD_TOO_LARGE = 413
    URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    UPGRADE_REQUIRED = 426

    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505

    @property
    def reason(self):
        """
        The reason phrase registered for this status code.
        """
        return REASON_PHRASES[self.value]

    @classmethod
    def parse(cls, src):
        """
        Parses a ``status-code`` from its wire form.

        ``status-code = 3DIGIT``

        :raises InvalidStatusCode: if ``src`` is not exactly three ASCII
            digits with a non-zero first digit, or the value is not a
            registered status code.
        """
        src = to_bytestring(src)

        if (len(src) != 3 or not 0x31 <= src[0] <= 0x39 or
                not all(0x30 <= b <= 0x39 for b in src[1:])):
            raise InvalidStatusCode("Malformed status code: %r" % src)

        try:
            return cls(int(src))
        except ValueError:
            raise InvalidStatusCode("Unknown status code: %r" % src)

    def __str__(self):
        return '%d %s' % (self.value, self.reason)


REASON_PHRASES = {
    100: 'Continue',
    101: 'Switching Protocols',
    200: 'OK',
    201: 'Created',
    202: 'Accepted',
    203: 'Non-Authoritative Information',
    204: 'No Content',
    205: 'Reset Content',
    206: 'Partial Content',
    300: 'Multiple Choices',
    301: 'Moved Permanently',
    302: 'Found',
    303: 'See Other',
    304: 'Not Modified',
    305: 'Use Proxy',
    307: 'Temporary Redirect',
    400: 'Bad Request',
    401: 'Unauthorized',
    402: 'Payment Required',
    403: 'Forbidden',
    404: 'Not Found',
    405: 'Method Not Allowed',
    406: 'Not Acceptable',
    407: 'Proxy Authentication Required',
    408: 'Request Timeout',
    409: 'Conflict',
    410: 'Gone',
    411: 'Length Required',
    412: 'Precondition Failed',
    413: 'Payload Too Large',
    414: 'URI Too Long',
    415: 'Unsupported Media Type',
    416: 'Range Not Satisfiable',
    417: 'Expectation Failed',
    426: 'Upgrade Required',
    500: 'Internal Server Error',
    501: 'Not Implemented',
    502: 'Bad Gateway',
    503: 'Service Unavailable',
    504: 'Gateway Timeout',
    505: 'HTTP Version Not Supported',
}
