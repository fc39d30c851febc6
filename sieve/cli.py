# -*- coding: utf-8 -*-
"""
sieve/cli
~~~~~~~~~

Command line interface for sieve: parses a raw message head and prints what
was found in it.
"""
import argparse
import logging
import sys

from sieve.common.exceptions import InvalidStatusCode, ParseError
from sieve.common.status import StatusCode
from sieve.http11.parser import Parser
from sieve.http11.request import URI_MAX_LENGTH

log = logging.getLogger('sieve')

_ARGUMENT_DEFAULTS = {
    'encoding': 'utf-8',
    'file': None,
    'max_uri_length': URI_MAX_LENGTH,
    'response': False,
    'verbose': False,
}


def parse_argument(argv=None):
    parser = argparse.ArgumentParser()
    parser.set_defaults(**_ARGUMENT_DEFAULTS)

    # positional arguments
    parser.add_argument(
        'file', nargs='?',
        help='read the message head from FILE (default: stdin)')

    # optional arguments
    parser.add_argument(
        '-e', '--encoding',
        help='set charset used to display header values')
    parser.add_argument(
        '--max-uri-length', type=int,
        help='set longest request target accepted (default: %d)'
             % URI_MAX_LENGTH)
    parser.add_argument(
        '-r', '--response', action='store_true',
        help='parse a response head instead of a request head')
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='set verbose mode (loglevel=DEBUG)')

    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    return args


def read_input(args):
    if args.file is None:
        return sys.stdin.buffer.read()

    with open(args.file, 'rb') as f:
        return f.read()


def _format_headers(headers, encoding):
    lines = []
    for name in headers:
        for value in headers.get_all(name):
            lines.append('  %s: %s' % (name, value.decode(encoding, 'replace')))
    return lines


def format_request(request, encoding):
    uri = request.uri
    lines = [
        'method: %s' % request.method.value,
        'version: %d.%d' % request.version,
        'scheme: %s' % uri.scheme,
    ]

    if uri.authority is not None:
        authority = uri.authority
        lines.append('host: %s (%s)' % (authority.host, authority.host.kind.value))
        if authority.user_info is not None:
            lines.append('userinfo: %s' % authority.user_info)
        if authority.port is not None:
            lines.append('port: %d' % authority.port)

    lines.extend([
        'path: %s' % uri.path,
        'query: %s' % uri.query,
        'fragment: %s' % uri.fragment,
        'headers:',
    ])
    lines.extend(_format_headers(request.headers, encoding))
    return '\n'.join(lines)


def format_response(response, encoding):
    lines = [
        'version: %d.%d' % response.version,
        'status: %s' % response.status,
        'reason: %s' % response.reason.decode(encoding, 'replace'),
        'headers:',
    ]
    lines.extend(_format_headers(response.headers, encoding))
    return '\n'.join(lines)


def main(argv=None):
    args = parse_argument(argv)
    if args.verbose:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        log.addHandler(handler)
        log.setLevel(logging.DEBUG)

    data = read_input(args)
    parser = Parser(max_uri_length=args.max_uri_length)

    try:
        if args.response:
            message = parser.parse_response(data)
        else:
            message = parser.parse_request(data)
    except ParseError as e:
        sys.stderr.write('%s: %s\n' % (StatusCode(e.status_code), e))
        return 1
    except InvalidStatusCode as e:
        sys.stderr.write('invalid status code: %s\n' % e)
        return 1

    if message is None:
        sys.stderr.write('incomplete message head\n')
        return 1

    if args.response:
        print(format_response(message, args.encoding))
    else:
        print(format_request(message, args.encoding))
    return 0


if __name__ == '__main__':
    sys.exit(main())
