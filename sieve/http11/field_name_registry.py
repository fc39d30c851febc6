# -*- coding: utf-8 -*-
"""
sieve/http11/field_name_registry
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Registry of the known HTTP header field names, keyed by their lower-case
token so that classifying a parsed name is a single dictionary lookup.

Each entry records the canonical spelling, the registration status and the
defining reference. The names are those of the IANA Hypertext Transfer
Protocol (HTTP) Field Name Registry:
https://www.iana.org/assignments/http-fields/http-fields.xhtml
"""
import collections

FieldNameEntry = collections.namedtuple(
    'FieldNameEntry', ['name', 'status', 'reference']
)

_FIELD_NAMES = [
    ('A-IM', 'permanent', 'RFC4229'),
    ('Accept', 'permanent', 'RFC7231 Section 5.3.2'),
    ('Accept-Additions', 'permanent', 'RFC4229'),
    ('Accept-CH', 'permanent', 'RFC8942'),
    ('Accept-Charset', 'deprecated', 'RFC7231 Section 5.3.3'),
    ('Accept-Datetime', 'permanent', 'RFC7089'),
    ('Accept-Encoding', 'permanent', 'RFC7231 Section 5.3.4'),
    ('Accept-Features', 'permanent', 'RFC4229'),
    ('Accept-Languages', 'permanent', 'RFC7231 Section 5.3.5'),
    ('Accept-Patch', 'provisional', 'RFC5789'),
    ('Accept-Post', 'permanent', 'W3C Linked Data Platform 1.0'),
    ('Accept-Ranges', 'permanent', 'RFC7233 Section 2.3'),
    ('Access-Control-Allow-Credentials', 'permanent', 'fetch spec WHATWG'),
    ('Access-Control-Allow-Headers', 'permanent', 'fetch spec WHATWG'),
    ('Access-Control-Allow-Methods', 'permanent', 'fetch spec WHATWG'),
    ('Access-Control-Allow-Origin', 'permanent', 'fetch spec WHATWG'),
    ('Access-Control-Expose-Headers', 'permanent', 'fetch spec WHATWG'),
    ('Access-Control-Max-Age', 'permanent', 'fetch spec WHATWG'),
    ('Access-Control-Request-Headers', 'permanent', 'fetch spec WHATWG'),
    ('Access-Control-Request-Method', 'permanent', 'fetch spec WHATWG'),
    ('Age', 'permanent', 'RFC7234 Section 5.1'),
    ('Allow', 'permanent', 'RFC7231 Section 7.4.1'),
    ('ALPN', 'permanent', 'RFC7639'),
    ('Alt-Svc', 'permanent', 'RFC7838'),
    ('Alt-Used', 'permanent', 'RFC7838'),
    ('Alternates', 'permanent', 'RFC4229'),
    ('Apply-To-Redirect-Ref', 'permanent', 'RFC4437'),
    ('Authentication-Control', 'permanent', 'RFC8053'),
    ('Authorization', 'permanent', 'RFC7235'),
    ('C-Ext', 'permanent', 'RFC4229'),
    ('C-Man', 'permanent', 'RFC4229'),
    ('C-Opt', 'permanent', 'RFC4229'),
    ('C-PEP', 'permanent', 'RFC4229'),
    ('C-PEP-Info', 'deprecated', 'RFC4229'),
    ('Cache-Control', 'permanent', 'RFC7234 Section 5.2'),
    ('Cal-Managed-ID', 'permanent', 'RFC8607'),
    ('CalDAV-Timezones', 'permanent', 'RFC7809'),
    ('CDN-Loop', 'permanent', 'RFC8586'),
    ('Cert-Not-After', 'permanent', 'RFC8739'),
    ('Cert-Not-Before', 'permanent', 'RFC8739'),
    ('Compliance', 'provisional', 'RFC4229'),
    ('Connection', 'permanent', 'RFC7230 Section 6.1'),
    ('Content-Disposition', 'permanent', 'RFC6266'),
    ('Content-Encoding', 'permanent', 'RFC7231 Section 3.1.2.2'),
    ('Content-ID', 'permanent', 'RFC4229'),
    ('Content-Language', 'permanent', 'RFC7231 Section 3.1.3.2'),
    ('Content-Length', 'permanent', 'RFC7230 Section 3.3.2'),
    ('Content-Location', 'permanent', 'RFC7231 Section 3.1.4.2'),
    ('Content-Range', 'permanent', 'RFC7233 Section 4.2'),
    ('Content-Script-Type', 'permanent', 'RFC4229'),
    ('Content-Style-Type', 'permanent', 'RFC4229'),
    ('Content-Transfer-Encoding', 'permanent', 'RFC4229'),
    ('Content-Type', 'permanent', 'RFC7231 Section 3.1.1.5'),
    ('Content-Version', 'permanent', 'RFC4229'),
    ('Cookie', 'permanent', 'RFC6265'),
    ('Cost', 'permanent', 'RFC4229'),
    ('Cross-Origin-Resource-Policy', 'permanent', 'fetch spec WHATWG'),
    ('DASL', 'permanent', 'RFC5323'),
    ('Date', 'permanent', 'RFC7231 Section 7.1.1.2'),
    ('DAV', 'permanent', 'RFC4918'),
    ('Default-Style', 'permanent', 'RFC4229'),
    ('Delta-Base', 'permanent', 'RFC4229'),
    ('Depth', 'permanent', 'RFC4918'),
    ('Derived-From', 'permanent', 'RFC4229'),
    ('Destination', 'permanent', 'RFC4918'),
    ('Differential-ID', 'permanent', 'RFC4229'),
    ('Digest', 'permanent', 'RFC4229'),
    ('Early-Data', 'permanent', 'RFC8470'),
    ('EDIINT-Features', 'permanent', 'RFC6017'),
    ('ETag', 'permanent', 'RFC7232 Section 2.3'),
    ('Expect', 'permanent', 'RFC7231 Section 5.1.1'),
    ('Expires', 'permanent', 'RFC7234 Section 5.3'),
    ('Ext', 'permanent', 'RFC4229'),
    ('Forwarded', 'permanent', 'RFC7239'),
    ('From', 'permanent', 'RFC7231 Section 5.5.1'),
    ('GetProfile', 'permanent', 'RFC4229'),
    ('Hobareg', 'permanent', 'RFC7486'),
    ('Host', 'permanent', 'RFC7230 Section 5.4'),
    ('HTTP2-Settings', 'permanent', 'RFC7540'),
    ('If', 'permanent', 'RFC4918'),
    ('If-Match', 'permanent', 'RFC7232 Section 3.1'),
    ('If-Modified-Since', 'permanent', 'RFC7232 Section 3.3'),
    ('If-None-Match', 'permanent', 'RFC7232 Section 3.2'),
    ('If-Range', 'permanent', 'RFC7232 Section 3.5'),
    ('If-Schedule-Tag-Match', 'permanent', 'RFC6638'),
    ('If-Unmodified-Since', 'permanent', 'RFC7232 Section 3.4'),
    ('IM', 'permanent', 'RFC4229'),
    ('Include-Referred-Token-Binding-ID', 'permanent', 'RFC8473'),
    ('Keep-Alive', 'permanent', 'RFC4229'),
    ('Label', 'permanent', 'RFC4229'),
    ('Last-Modified', 'permanent', 'RFC7232 Section 2.2'),
    ('Link', 'permanent', 'RFC8288'),
    ('Location', 'permanent', 'RFC7231 Section 7.1.2'),
    ('Lock-Token', 'permanent', 'RFC4918'),
    ('Man', 'permanent', 'RFC4229'),
    ('Max-Forwards', 'permanent', 'RFC7231 Section 5.1.2'),
    ('Memento-Datetime', 'permanent', 'RFC7089'),
    ('Message-ID', 'permanent', 'RFC4229'),
    ('Meter', 'permanent', 'RFC4229'),
    ('MIME-Version', 'permanent', 'RFC7231 Appendix A.1'),
    ('Negotiate', 'permanent', 'RFC4229'),
    ('Non-Compliance', 'permanent', 'RFC4229'),
    ('Opt', 'permanent', 'RFC4229'),
    ('Optional', 'permanent', 'RFC4229'),
    ('Optional-WWW-Authenticate', 'permanent', 'RFC8053'),
    ('Ordering-Type', 'permanent', 'RFC4229'),
    ('Origin', 'permanent', 'RFC6454'),
    ('OSCOR', 'permanent', 'RFC8613'),
    ('Overwrite', 'permanent', 'RFC4918'),
    ('P3P', 'permanent', 'RFC4229'),
    ('PEP', 'permanent', 'RFC4229'),
    ('Pep-Info', 'permanent', 'RFC4229'),
    ('PICS-Label', 'permanent', 'RFC4229'),
    ('Position', 'permanent', 'RFC4229'),
    ('Pragma', 'permanent', 'RFC7234 Section 5.4'),
    ('Prefer', 'permanent', 'RFC7240'),
    ('Preference-Applied', 'permanent', 'RFC7240'),
    ('ProfileObject', 'permanent', 'RFC4229'),
    ('Protocol', 'permanent', 'RFC4229'),
    ('Protocol-Request', 'permanent', 'RFC4229'),
    ('Proxy-Authenticate', 'permanent', 'RFC7235 Section 4.3'),
    ('Proxy-Authorization', 'permanent', 'RFC7235 Section 4.4'),
    ('Proxy-Features', 'permanent', 'RFC4229'),
    ('Proxy-Instruction', 'permanent', 'RFC4229'),
    ('Public', 'permanent', 'RFC4229'),
    ('Public-Key-Pins', 'permanent', 'RFC7469'),
    ('Public-Key-Pins-Report-Only', 'permanent', 'RFC7469'),
    ('Range', 'permanent', 'RFC7233 Section 3.1'),
    ('Redirect-Ref', 'permanent', 'RFC4437'),
    ('Referer', 'permanent', 'RFC7231 Section 5.5.2'),
    ('Replay-Nonce', 'permanent', 'RFC8555'),
    ('Resolution-Hint', 'permanent', 'RFC4229'),
    ('Resolver-Location', 'permanent', 'RFC4229'),
    ('Retry-After', 'permanent', 'RFC7231 Section 7.1.3'),
    ('Safe', 'permanent', 'RFC4229'),
    ('Schedule-Reply', 'permanent', 'RFC6638'),
    ('Schedule-Tag', 'permanent', 'RFC6638'),
    ('Sec-Token-Binding', 'permanent', 'RFC8473'),
    ('Sec-WebSocket-Accept', 'permanent', 'RFC6455'),
    ('Sec-WebSocket-Extensions', 'permanent', 'RFC6455'),
    ('Sec-WebSocket-Key', 'permanent', 'RFC6455'),
    ('Sec-WebSocket-Protocol', 'permanent', 'RFC6455'),
    ('Sec-WebSocket-Version', 'permanent', 'RFC6455'),
    ('Security-Scheme', 'permanent', 'RFC4229'),
    ('Server', 'permanent', 'RFC7231 Section 7.4.2'),
    ('Set-Cookie', 'permanent', 'RFC6265'),
    ('SetProfile', 'permanent', 'RFC4229'),
    ('SLUG', 'permanent', 'RFC5023'),
    ('SoapAction', 'permanent', 'RFC4229'),
    ('Status-URI', 'permanent', 'RFC4229'),
    ('Strict-Transport-Security', 'permanent', 'RFC6797'),
    ('SubOK', 'permanent', 'RFC4229'),
    ('Subst', 'permanent', 'RFC4229'),
    ('Sunset', 'permanent', 'RFC8594'),
    ('Surrogate-Capability', 'permanent', 'RFC4229'),
    ('Surrogate-Control', 'permanent', 'RFC4229'),
    ('TCN', 'permanent', 'RFC4229'),
    ('TE', 'permanent', 'RFC7230 Section 4.3'),
    ('Timeout', 'permanent', 'RFC4918'),
    ('Title', 'permanent', 'RFC4229'),
    ('Topic', 'permanent', 'RFC8030'),
    ('Trailer', 'permanent', 'RFC7230 Section 4.4'),
    ('Transfer-Encoding', 'permanent', 'RFC7230 Section 3.3.1'),
    ('TTL', 'permanent', 'RFC8030'),
    ('UA-Color', 'permanent', 'RFC4229'),
    ('UA-Media', 'permanent', 'RFC4229'),
    ('UA-Pixels', 'permanent', 'RFC4229'),
    ('UA-Resolution', 'permanent', 'RFC4229'),
    ('UA-Windowpixels', 'permanent', 'RFC4229'),
    ('Upgrade', 'permanent', 'RFC7230 Section 6.7'),
    ('Urgency', 'permanent', 'RFC8030'),
    ('URI', 'permanent', 'RFC4229'),
    ('User-Agent', 'permanent', 'RFC7231 Section 5.5.3'),
    ('Vary-Variant', 'permanent', 'RFC4229'),
    ('Vary', 'permanent', 'RFC7231 Section 7.1.4'),
    ('Version', 'permanent', 'RFC4229'),
    ('Via', 'permanent', 'RFC7230 Section 5.7.1'),
    ('Want-Digest', 'permanent', 'RFC4229'),
    ('Warning', 'permanent', 'RFC7234 Section 5.5'),
    ('WWW-Authenticate', 'permanent', 'RFC7235 Section 4.1'),
    ('X-Content-Type-Options', 'permanent', 'fetch spec WHATWG'),
    ('X-Frame-Options', 'permanent', 'RFC7034'),
]

FIELD_NAME_REGISTRY = dict(
    (name.lower(), FieldNameEntry(name, status, reference))
    for name, status, reference in _FIELD_NAMES
)
