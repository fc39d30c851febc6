# -*- coding: utf-8 -*-
"""
sieve/common/headers
~~~~~~~~~~~~~~~~~~~~

Contains sieve's structure for storing a parsed HTTP header section.
"""
import logging
from collections.abc import MutableMapping

from ..http11.fields import SET_COOKIE, HeaderFieldName, HeaderFieldValue
from .exceptions import BadRequest
from .util import split_at_next, to_bytestring

log = logging.getLogger(__name__)

CRLF = b'\r\n'
OWS = b' \t'


class HeaderMap(MutableMapping):
    """
    A structure that contains the header fields of a message.

    Each field name maps to a single value, and a later field with the same
    name replaces an earlier one. ``Set-Cookie`` is the exception: RFC 6265
    gives every ``Set-Cookie`` line its own meaning, so the first value is
    kept in the map and every later one is appended to a side list,
    :attr:`set_cookies`, rather than overwriting it. No other name is ever
    kept more than once.

    Keys may be given as :class:`HeaderFieldName <sieve.http11.fields.HeaderFieldName>`
    objects or as ``str`` or ``bytes`` in any case.
    """
    def __init__(self, *args, **kwargs):
        self._fields = {}

        #: Every ``Set-Cookie`` value after the first, in the order received.
        self.set_cookies = []

        for arg in args:
            for name, value in arg:
                self.insert(name, value)

        for name, value in kwargs.items():
            self.insert(name, value)

    @classmethod
    def parse(cls, src):
        """
        Parses a header section: any number of lines of the form
        ``field-name ":" OWS field-value OWS CRLF``.

        :raises BadRequest: if any line lacks a colon, has an invalid field
            name, contains a CR or LF outside its CRLF terminator, or is not
            terminated by CRLF. Nothing is returned for the lines that did
            parse.
        """
        rest = to_bytestring(src)
        headers = cls()

        while rest:
            split = split_at_next(rest, CRLF)
            if split is None:
                log.debug("Rejecting unterminated header line: %r", rest)
                raise BadRequest("Header line not terminated by CRLF")
            line, rest = split

            # CR and LF only ever appear together, as the line terminator.
            if b'\r' in line or b'\n' in line:
                log.debug("Rejecting header line with bare CR or LF: %r", line)
                raise BadRequest("Bare CR or LF in header line: %r" % line)

            split = split_at_next(line, b':')
            if split is None:
                log.debug("Rejecting header line without a colon: %r", line)
                raise BadRequest("Header line has no colon: %r" % line)

            name = HeaderFieldName.parse(split[0])
            value = HeaderFieldValue.parse(split[1].strip(OWS))
            headers.insert(name, value)

        return headers

    def insert(self, name, value):
        """
        Adds a field. A normal field replaces any previous value for the
        same name; a repeated ``Set-Cookie`` is appended to
        :attr:`set_cookies` instead.

        :raises BadRequest: if ``name`` is not a valid field name.
        """
        name = _to_field_name(name)
        value = HeaderFieldValue.parse(value)

        if name == SET_COOKIE and name in self._fields:
            self.set_cookies.append(value)
        else:
            self._fields[name] = value

    def __getitem__(self, key):
        """
        Returns the value stored for ``key``. For ``Set-Cookie`` this is the
        first value received.
        """
        try:
            return self._fields[_to_field_name(key)]
        except (BadRequest, ValueError):
            raise KeyError("Nonexistent header key: {}".format(key))

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __delitem__(self, key):
        """
        Deletes the field. Deleting ``Set-Cookie`` also drops
        :attr:`set_cookies`.
        """
        try:
            name = _to_field_name(key)
            del self._fields[name]
        except (BadRequest, ValueError):
            raise KeyError("Nonexistent header key: {}".format(key))

        if name == SET_COOKIE:
            self.set_cookies = []

    def __iter__(self):
        return iter(self._fields)

    def __len__(self):
        """
        The number of distinct field names.
        """
        return len(self._fields)

    def __contains__(self, key):
        try:
            return _to_field_name(key) in self._fields
        except (BadRequest, ValueError):
            return False

    def is_empty(self):
        return not self._fields

    def get_all(self, key):
        """
        Returns every value received for ``key`` as a list, in order. This
        is the way to get at all the ``Set-Cookie`` values at once.
        """
        try:
            first = self[key]
        except KeyError:
            return []

        if _to_field_name(key) == SET_COOKIE:
            return [first] + self.set_cookies
        return [first]

    def __eq__(self, other):
        if not isinstance(other, HeaderMap):
            return NotImplemented
        return (self._fields == other._fields and
                self.set_cookies == other.set_cookies)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self):
        return 'HeaderMap(%r, set_cookies=%r)' % (
            self._fields, self.set_cookies
        )


def _to_field_name(key):
    """
    Normalizes a key into a ``HeaderFieldName``.
    """
    if isinstance(key, HeaderFieldName):
        return key
    return HeaderFieldName.parse(key)
