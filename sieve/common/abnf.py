# -*- coding: utf-8 -*-
"""
sieve/common/abnf
~~~~~~~~~~~~~~~~~

Byte classification and scanning primitives for the ABNF rules shared by
RFC 3986 and RFC 7230.

All the functions here work on integer byte values (what you get from
indexing or iterating a ``bytes`` object) and never raise on bad input:
scanners return ``None`` when the input cannot be matched, and it is up to
the caller to turn that into a
:class:`BadRequest <sieve.common.exceptions.BadRequest>`.
"""
import string


def _byte_set(chars):
    return frozenset(chars.encode('ascii'))


ALPHA = _byte_set(string.ascii_letters)
DIGIT = _byte_set(string.digits)

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED = ALPHA | DIGIT | _byte_set('-._~')

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
SUB_DELIMS = _byte_set("!$&'()*+,;=")

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
#
# RFC 5234 only names the uppercase letters, so lowercase digits are not
# accepted anywhere in a percent-encoded triplet.
HEXDIG = DIGIT | _byte_set('ABCDEF')

# tchar = "!" / "#" / "$" / "%" / "&" / "'" / "*" / "+" / "-" / "." /
#         "^" / "_" / "`" / "|" / "~" / DIGIT / ALPHA
TCHAR = ALPHA | DIGIT | _byte_set("!#$%&'*+-.^_`|~")

PERCENT = ord('%')


def is_unreserved(byte):
    """
    Whether ``byte`` is an RFC 3986 ``unreserved`` character.
    """
    return byte in UNRESERVED


def is_sub_delims(byte):
    """
    Whether ``byte`` is an RFC 3986 ``sub-delims`` character.
    """
    return byte in SUB_DELIMS


def is_hex_dig(byte):
    """
    Whether ``byte`` is a ``HEXDIG``. Only ``0-9`` and ``A-F`` qualify.
    """
    return byte in HEXDIG


def is_tchar(byte):
    """
    Whether ``byte`` is an RFC 7230 token character.
    """
    return byte in TCHAR


def _never(byte):
    return False


def parse_pct_encoded(src, predicate=_never):
    """
    Scans the longest prefix of ``src`` made of ``unreserved`` and
    ``sub-delims`` characters, bytes accepted by ``predicate`` and complete
    ``pct-encoded`` triplets, and returns it as a string.

    ``pct-encoded = "%" HEXDIG HEXDIG``

    A ``%`` always starts a triplet, even if ``predicate`` would accept it,
    and the two bytes that follow must be hex digits. If the scan stops part
    way through a triplet the whole scan fails and ``None`` is returned.

    ``predicate`` must only accept ASCII bytes.
    """
    consumed = 0

    # The number of hex digits still owed to the current triplet.
    pending = 0

    for byte in src:
        if pending:
            if byte not in HEXDIG:
                break
            pending -= 1
        elif byte == PERCENT:
            pending = 2
        elif not (byte in UNRESERVED or byte in SUB_DELIMS or predicate(byte)):
            break
        consumed += 1

    if pending:
        return None

    return src[:consumed].decode('ascii')


def _colon_or_at(byte):
    return byte == 0x3A or byte == 0x40


def parse_pchar(src, predicate=_never):
    """
    Scans a run of ``pchar`` (plus anything ``predicate`` accepts) from the
    start of ``src``.

    ``pchar = unreserved / pct-encoded / sub-delims / ":" / "@"``
    """
    return parse_pct_encoded(
        src, lambda b: _colon_or_at(b) or predicate(b)
    )


def parse_reg_name(src):
    """
    Scans a ``reg-name`` from the start of ``src``.

    ``reg-name = *( unreserved / pct-encoded / sub-delims )``
    """
    return parse_pct_encoded(src)


def parse_hex_dig(byte):
    """
    Returns the value of a single ``HEXDIG``, or ``None``.
    """
    if 0x30 <= byte <= 0x39:
        return byte - 0x30
    elif 0x41 <= byte <= 0x46:
        return byte - 0x41 + 10
    return None


def parse_hex_uint(src, bits=16):
    """
    Parses up to ``bits // 4`` leading hex digits of ``src`` as an unsigned
    integer. Capping the digit count means the value can never overflow the
    requested width.

    Returns a tuple of the value and the unconsumed remainder of ``src``, or
    ``None`` if ``src`` does not start with a hex digit.
    """
    value = 0
    count = 0

    for byte in src[:bits // 4]:
        digit = parse_hex_dig(byte)
        if digit is None:
            break
        value = (value << 4) + digit
        count += 1

    if not count:
        return None

    return value, src[count:]
