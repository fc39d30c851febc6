# -*- coding: utf-8 -*-
"""
sieve
~~~~~

Strict parsers for the components of an HTTP/1.1 message head: the request
line, the header section and the URI of a request target.
"""
__version__ = '0.1.0'

from .common.exceptions import (
    ParseError, BadRequest, MethodNotImplemented, URITooLong,
    InvalidStatusCode
)
from .common.headers import HeaderMap
from .common.status import StatusCode
from .http11.fields import HeaderFieldName, HeaderFieldValue
from .http11.parser import Parser, Request, Response
from .http11.request import Method, RequestLine, Version
from .uri.authority import Authority, Host, HostKind, UserInfo
from .uri.path import Fragment, Path, Query
from .uri.scheme import Scheme
from .uri.uri import Uri

__all__ = [
    'ParseError', 'BadRequest', 'MethodNotImplemented', 'URITooLong',
    'InvalidStatusCode', 'HeaderMap', 'StatusCode', 'HeaderFieldName',
    'HeaderFieldValue', 'Parser', 'Request', 'Response', 'Method',
    'RequestLine', 'Version', 'Authority', 'Host', 'HostKind', 'UserInfo',
    'Fragment', 'Path', 'Query', 'Scheme', 'Uri',
]

# Set default logging handler.
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
