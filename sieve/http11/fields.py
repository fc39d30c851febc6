# -*- coding: utf-8 -*-
"""
sieve/http11/fields
~~~~~~~~~~~~~~~~~~~

The two halves of a header field, as defined in RFC 7230 Section 3.2::

    header-field   = field-name ":" OWS field-value OWS
    field-name     = token
    field-value    = *( field-content / obs-fold )
    field-content  = field-vchar [ 1*( SP / HTAB ) field-vchar ]
    field-vchar    = VCHAR / obs-text
"""
from ..common.abnf import TCHAR
from ..common.exceptions import BadRequest
from ..common.util import to_bytestring
from .field_name_registry import FIELD_NAME_REGISTRY


class HeaderFieldName(str):
    """
    A header field name, normalized to lower case.

    Field names are compared case-insensitively; normalizing on parse means
    plain string equality and hashing do the right thing. A name is either
    one of the registered names in
    :data:`FIELD_NAME_REGISTRY <sieve.http11.field_name_registry.FIELD_NAME_REGISTRY>`
    or a custom token.
    """
    __slots__ = ()

    @classmethod
    def parse(cls, src):
        """
        :raises BadRequest: if ``src`` is empty or contains a byte that is
            not a token character.
        """
        src = to_bytestring(src)

        if not src or not all(b in TCHAR for b in src):
            raise BadRequest("Invalid header field name: %r" % src)

        return cls(src.decode('ascii').lower())

    @property
    def registered(self):
        """
        The registry entry for this name, or ``None`` for a custom name.
        """
        return FIELD_NAME_REGISTRY.get(self)

    @property
    def is_registered(self):
        return self in FIELD_NAME_REGISTRY


class HeaderFieldValue(bytes):
    """
    A header field value, kept as the raw bytes received.

    ``obs-text`` (bytes 0x80 to 0xFF) is legal in a field value, so a value
    is not guaranteed to be valid text. Use :meth:`as_str` to get a string
    view, which fails only if the bytes cannot be decoded.
    """
    __slots__ = ()

    @classmethod
    def parse(cls, src):
        """
        Accepts any bytes verbatim.
        """
        return cls(to_bytestring(src))

    def as_str(self, encoding='utf-8'):
        """
        Returns the value as a string.

        :raises UnicodeDecodeError: if the value is not valid in
            ``encoding``.
        """
        return self.decode(encoding)


#: Well-known names, for lookups in a
#: :class:`HeaderMap <sieve.common.headers.HeaderMap>`.
CONNECTION = HeaderFieldName('connection')
CONTENT_LENGTH = HeaderFieldName('content-length')
CONTENT_TYPE = HeaderFieldName('content-type')
COOKIE = HeaderFieldName('cookie')
HOST = HeaderFieldName('host')
SET_COOKIE = HeaderFieldName('set-cookie')
TRANSFER_ENCODING = HeaderFieldName('transfer-encoding')
USER_AGENT = HeaderFieldName('user-agent')
