# -*- coding: utf-8 -*-
"""
sieve/uri/authority
~~~~~~~~~~~~~~~~~~~

The authority component of a URI, as defined in RFC 3986 Section 3.2::

    authority = [ userinfo "@" ] host [ ":" port ]
    port      = *DIGIT

The host is the tricky part. RFC 3986 allows four quite different shapes of
host and they need to be told apart by their syntax alone::

    host        = IP-literal / IPv4address / reg-name
    IP-literal  = "[" ( IPv6address / IPvFuture ) "]"
    IPvFuture   = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
"""
import collections
import ipaddress
from enum import Enum

from ..common.abnf import (
    DIGIT, SUB_DELIMS, UNRESERVED, parse_hex_uint, parse_pct_encoded,
    parse_reg_name
)
from ..common.exceptions import BadRequest
from ..common.util import split_at_next, to_bytestring

#: How far from the end of an authority the last colon may sit and still be
#: read as a port separator: the colon itself plus up to five port digits.
PORT_WINDOW = 6

#: The largest port that fits in the 16 bits a TCP or UDP port occupies.
MAX_PORT = 65535

_IPV_FUTURE_CHARS = UNRESERVED | SUB_DELIMS | frozenset(b':')


def _user_info_char(byte):
    return byte == 0x3A


class UserInfo(str):
    """
    The user information subcomponent of an authority.

    ``userinfo = *( unreserved / pct-encoded / sub-delims / ":" )``
    """
    __slots__ = ()

    @classmethod
    def parse(cls, src):
        src = to_bytestring(src)
        user_info = parse_pct_encoded(src, _user_info_char)

        if user_info is None or len(user_info) != len(src):
            raise BadRequest("Invalid userinfo: %r" % src)

        return cls(user_info)


class HostKind(Enum):
    """
    The shape of a parsed :class:`Host`.
    """
    #: An IPv4 or IPv6 address.
    IPVN = 'ipvn'
    #: An IPvFuture literal: a version number and an opaque address.
    IPV_FUTURE = 'ipv-future'
    #: A registered name.
    DOMAIN = 'domain'


class Host(object):
    """
    A host as defined in RFC 3986 Section 3.2.2.

    A host is exactly one of the :class:`HostKind` shapes. ``kind`` says
    which, and ``value`` holds the data for that shape:

    - ``HostKind.IPVN``: an ``ipaddress.IPv4Address`` or
      ``ipaddress.IPv6Address``.
    - ``HostKind.IPV_FUTURE``: a ``(version, address)`` tuple.
    - ``HostKind.DOMAIN``: the registered name as a string.

    :param kind: The :class:`HostKind` of the host.
    :param value: The data for that kind.
    """
    __slots__ = ('kind', 'value')

    def __init__(self, kind, value):
        self.kind = kind
        self.value = value

    @classmethod
    def ipvn(cls, address):
        return cls(HostKind.IPVN, ipaddress.ip_address(address))

    @classmethod
    def ipv_future(cls, version, address):
        return cls(HostKind.IPV_FUTURE, (version, address))

    @classmethod
    def domain(cls, name):
        return cls(HostKind.DOMAIN, name)

    @classmethod
    def parse(cls, src):
        """
        Parses a host, trying each shape in turn: an IPvFuture literal, an
        IPv6 literal, an IPv4 address and finally a registered name.

        An IPv4 address is a strict subset of the registered name syntax and
        validates itself, so trying it first and falling back to a
        registered name never misreads either.

        :raises BadRequest: if ``src`` is empty or matches none of the
            shapes.
        """
        src = to_bytestring(src)

        if not src:
            raise BadRequest("Host must not be empty")

        if src.startswith(b'[v'):
            version, address = _parse_ipv_future(src)
            return cls.ipv_future(version, address)

        if src.startswith(b'[') and src.endswith(b']'):
            return cls(HostKind.IPVN, _parse_ipv6(src[1:-1]))

        try:
            return cls(HostKind.IPVN, ipaddress.IPv4Address(src.decode('ascii')))
        except ValueError:
            pass

        name = parse_reg_name(src)
        if name is None or len(name) != len(src):
            raise BadRequest("Invalid host: %r" % src)

        return cls.domain(name)

    def __eq__(self, other):
        if not isinstance(other, Host):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return 'Host(%s, %r)' % (self.kind, self.value)

    def __str__(self):
        if self.kind is HostKind.DOMAIN:
            return self.value
        elif self.kind is HostKind.IPV_FUTURE:
            return '[v%X.%s]' % self.value
        elif self.value.version == 6:
            return '[%s]' % self.value.compressed
        return str(self.value)


def _parse_ipv6(src):
    # Zone identifiers are an RFC 6874 extension that RFC 3986 literals
    # cannot carry, but ipaddress accepts them.
    if b'%' in src:
        raise BadRequest("Invalid IPv6 literal: %r" % src)

    try:
        return ipaddress.IPv6Address(src.decode('ascii'))
    except ValueError:
        raise BadRequest("Invalid IPv6 literal: %r" % src)


def _parse_ipv_future(src):
    """
    Parses ``"[" IPvFuture "]"`` into a ``(version, address)`` tuple.

    The version is limited to 16 bits, so at most four hex digits.
    """
    if not (src.startswith(b'[v') and src.endswith(b']')):
        raise BadRequest("Invalid IPvFuture literal: %r" % src)

    parsed = parse_hex_uint(src[2:-1], bits=16)
    if parsed is None:
        raise BadRequest("IPvFuture literal has no version: %r" % src)

    version, rest = parsed
    if not rest.startswith(b'.'):
        raise BadRequest("Invalid IPvFuture version: %r" % src)

    address = rest[1:]
    if not address or not all(b in _IPV_FUTURE_CHARS for b in address):
        raise BadRequest("Invalid IPvFuture address: %r" % src)

    return version, address.decode('ascii')


def _parse_port(src):
    """
    Parses the digits after a port separator. An empty port is valid syntax
    and is reported as ``0``, which is distinct from having no port at all.
    """
    if not all(b in DIGIT for b in src):
        raise BadRequest("Invalid port: %r" % src)

    port = int(src) if src else 0
    if port > MAX_PORT:
        raise BadRequest("Port out of range: %r" % src)

    return port


class Authority(collections.namedtuple('Authority', ['user_info', 'host', 'port'])):
    """
    The authority of a URI: optional :class:`UserInfo`, a :class:`Host`, and
    an optional port.

    ``port`` is ``None`` when no port was given and ``0`` when the authority
    ended in a bare ``:``.
    """
    __slots__ = ()

    def __new__(cls, user_info, host, port=None):
        return super(Authority, cls).__new__(cls, user_info, host, port)

    @classmethod
    def parse(cls, src):
        """
        Parses an authority.

        The port separator is the last colon in ``src``, and only if it falls
        within the last :data:`PORT_WINDOW` bytes. A colon further back
        cannot start a port this parser would accept, and colons inside an
        IP literal are not separators at all, so in both cases the whole
        remainder is parsed as a host. Within the window the bytes before the
        colon must still parse as a host for the colon to count: that is
        what keeps the tail of ``[::1]`` out of the port.

        :raises BadRequest: if any part of the authority is malformed.
        """
        src = to_bytestring(src)

        split = split_at_next(src, b'@')
        if split is not None:
            user_info, rest = UserInfo.parse(split[0]), split[1]
        else:
            user_info, rest = None, src

        colon = rest.rfind(b':')
        if colon != -1 and colon >= len(rest) - PORT_WINDOW:
            try:
                host = Host.parse(rest[:colon])
            except BadRequest:
                pass
            else:
                return cls(user_info, host, _parse_port(rest[colon + 1:]))

        return cls(user_info, Host.parse(rest), None)

    def __str__(self):
        authority = str(self.host)

        if self.user_info is not None:
            authority = '%s@%s' % (self.user_info, authority)

        if self.port == 0:
            authority += ':'
        elif self.port is not None:
            authority += ':%d' % self.port

        return authority
