# -*- coding: utf-8 -*-
"""
test_uri.py
~~~~~~~~~~~

Unit tests for sieve's URI component parsers.
"""
import ipaddress

import pytest
import rfc3986

from sieve.common.exceptions import BadRequest
from sieve.uri.authority import Authority, Host, HostKind, UserInfo
from sieve.uri.path import Fragment, Path, Query
from sieve.uri.scheme import Scheme
from sieve.uri.uri import Uri


class TestScheme(object):
    @pytest.mark.parametrize('data', [b'+', b'1', b'%', b'-http'])
    def test_non_alpha_first_byte_is_a_bad_request(self, data):
        with pytest.raises(BadRequest):
            Scheme.parse(data)

    @pytest.mark.parametrize('data', [b'http~', b'c@t', b'ht tp'])
    def test_invalid_byte_is_a_bad_request(self, data):
        with pytest.raises(BadRequest):
            Scheme.parse(data)

    def test_empty_scheme_is_valid(self):
        assert Scheme.parse(b'') == ''

    def test_known_protocols_are_schemes(self):
        assert Scheme.parse(b'http') == 'http'
        assert Scheme.parse(b'https') == 'https'

    def test_digits_and_symbols_after_first_letter(self):
        assert Scheme.parse(b'coap+tcp') == 'coap+tcp'
        assert Scheme.parse(b'x-1.2') == 'x-1.2'

    def test_scheme_is_lower_cased(self):
        assert Scheme.parse(b'HTTP') == 'http'
        assert Scheme.parse(b'SCHEME') == 'scheme'


class TestUserInfo(object):
    @pytest.mark.parametrize('data', [b'%', b'%F', b'%1a', b'@', b'a b'])
    def test_invalid_user_info_is_a_bad_request(self, data):
        with pytest.raises(BadRequest):
            UserInfo.parse(data)

    @pytest.mark.parametrize('data', [
        '',
        'A9-3F.l6_o2~',
        "!*$+&,';(=)",
        '%2F%9A%11%FF',
        '%2B!*A22=(%108',
        'user:password',
    ])
    def test_valid_user_info(self, data):
        assert UserInfo.parse(data.encode('ascii')) == data


class TestHost(object):
    def test_empty_is_a_bad_request(self):
        with pytest.raises(BadRequest):
            Host.parse(b'')

    def test_reserved_prefix_is_a_bad_request(self):
        with pytest.raises(BadRequest):
            Host.parse(b'@example.org')

    def test_ipv_future_is_a_host(self):
        host = Host.parse(b'[v4.2000:db8:ff00:32:1000]')

        assert host.kind is HostKind.IPV_FUTURE
        assert host.value == (4, '2000:db8:ff00:32:1000')

    def test_ipv_future_accepts_multiple_hex_digits(self):
        host = Host.parse(b'[vFF.2001:db7:ff00:32:4444]')
        assert host == Host.ipv_future(255, '2001:db7:ff00:32:4444')

    @pytest.mark.parametrize('data', [
        b'[v.2001:db8:ff00:32:1111]',
        b'[vG.2001:db8:ff00:32:1111]',
        b'[va.2001:db8:ff00:32:1111]',
        b'[vFFFF1.2001:db8:ff00:32:1122]',
        b'[vFF2001:db8:ff00:32:1111]',
        b'[v1.]',
        b'[v1.abc/def]',
        b'[v1.abc',
    ])
    def test_malformed_ipv_future_is_a_bad_request(self, data):
        with pytest.raises(BadRequest):
            Host.parse(data)

    def test_ipv_future_prefix_is_case_sensitive(self):
        with pytest.raises(BadRequest):
            Host.parse(b'[V9.2001:db8:ff00:42:8329]')

    def test_ipv6_address_is_a_host(self):
        host = Host.parse(b'[2001:db8:aaaa:bbbb:cccc:dddd:eeee:0001]')

        assert host.kind is HostKind.IPVN
        assert host.value == ipaddress.ip_address(
            '2001:db8:aaaa:bbbb:cccc:dddd:eeee:1'
        )

    @pytest.mark.parametrize('data', [
        b'[2001:db8::zz]', b'[]', b'[fe80::1%25eth0]', b'[127.0.0.1]',
    ])
    def test_invalid_ipv6_literal_is_a_bad_request(self, data):
        with pytest.raises(BadRequest):
            Host.parse(data)

    def test_ipv4_address_is_a_host(self):
        assert Host.parse(b'127.0.0.1') == Host.ipvn('127.0.0.1')

    def test_numeric_non_address_falls_back_to_a_domain(self):
        host = Host.parse(b'1.2.3.999')

        assert host.kind is HostKind.DOMAIN
        assert host.value == '1.2.3.999'

    def test_domain_name_is_a_host(self):
        assert Host.parse(b'example.com') == Host.domain('example.com')

    def test_domain_name_may_be_percent_encoded(self):
        assert Host.parse(b'ex%41mple.com') == Host.domain('ex%41mple.com')

    @pytest.mark.parametrize('data', [
        b'example.com', b'ex%41mple.com', b'[v4.2000:db8:ff00:32:1000]',
        b'[vAB.x:y]',
    ])
    def test_rendering_is_idempotent(self, data):
        host = Host.parse(data)
        rendered = str(host).encode('ascii')

        assert rendered == data
        assert Host.parse(rendered) == host

    def test_ip_literals_render_canonically(self):
        assert str(Host.parse(b'[2001:DB8:0:0:0:0:0:1]')) == '[2001:db8::1]'
        assert str(Host.parse(b'10.0.0.1')) == '10.0.0.1'

    def test_hosts_of_different_kinds_are_not_equal(self):
        assert Host.parse(b'10.0.0.1') != Host.domain('10.0.0.1')


class TestAuthority(object):
    def test_empty_is_a_bad_request(self):
        with pytest.raises(BadRequest):
            Authority.parse(b'')

    def test_example_is_valid(self):
        assert Authority.parse(b'example.com:8042') == Authority(
            None, Host.domain('example.com'), 8042
        )

    def test_empty_port_is_zero(self):
        authority = Authority.parse(b'example.com:')

        assert authority.host == Host.domain('example.com')
        assert authority.port == 0

    def test_no_port_is_none(self):
        assert Authority.parse(b'example.com').port is None

    def test_five_digit_port_is_valid(self):
        assert Authority.parse(b'example.com:50000').port == 50000
        assert Authority.parse(b'example.com:65535').port == 65535

    @pytest.mark.parametrize('data', [
        b'example.com:65536',
        b'example.com:70000',
        b'example.com:123456',
        b'example.com:8a',
        b'example.com:-1',
    ])
    def test_invalid_port_is_a_bad_request(self, data):
        with pytest.raises(BadRequest):
            Authority.parse(data)

    def test_colon_outside_port_window_belongs_to_the_host(self):
        # The last colon is seven bytes from the end, so it is not a port
        # separator, and a colon is not valid in a registered name.
        with pytest.raises(BadRequest):
            Authority.parse(b'example:abcdef')

    def test_ipv4_address_with_port(self):
        assert Authority.parse(b'127.0.0.1:80') == Authority(
            None, Host.ipvn('127.0.0.1'), 80
        )

    def test_ipv6_address_with_and_without_port(self):
        host = Host.ipvn('::1')

        assert Authority.parse(b'[::1]') == Authority(None, host, None)
        assert Authority.parse(b'[::1]:8080') == Authority(None, host, 8080)
        assert Authority.parse(b'[::1]:') == Authority(None, host, 0)

    def test_ipv_future_with_and_without_port(self):
        host = Host.ipv_future(4, '2000:db8:ff00:32:1000')

        assert Authority.parse(b'[v4.2000:db8:ff00:32:1000]:8080') == (
            Authority(None, host, 8080)
        )
        assert Authority.parse(b'[v4.2000:db8:ff00:32:1000]') == (
            Authority(None, host, None)
        )

    def test_user_info(self):
        authority = Authority.parse(b'user:pass@example.com:8080')

        assert authority.user_info == 'user:pass'
        assert authority.host == Host.domain('example.com')
        assert authority.port == 8080

    def test_empty_user_info_is_present(self):
        assert Authority.parse(b'@example.com').user_info == ''

    def test_only_the_first_at_separates_user_info(self):
        with pytest.raises(BadRequest):
            Authority.parse(b'a@b@example.com')

    def test_rendering(self):
        for data in [b'example.com', b'example.com:', b'u@example.com:80',
                     b'[::1]:443']:
            assert str(Authority.parse(data)).encode('ascii') == data


class TestPath(object):
    def test_non_pchar_prefix_is_a_bad_request(self):
        with pytest.raises(BadRequest):
            Path.parse(b'>hi/yo')

    def test_leading_double_slash_is_a_bad_request(self):
        with pytest.raises(BadRequest):
            Path.parse(b'//hi')

    def test_empty_path_is_valid(self):
        assert Path.parse(b'') == ''

    def test_single_slash_is_valid(self):
        assert Path.parse(b'/') == '/'

    def test_trailing_slashes_fold_into_one(self):
        assert Path.parse(b'hi//') == 'hi/'
        assert Path.parse(b'/hi///') == '/hi/'

    def test_interior_slashes_fold_into_one(self):
        assert Path.parse(b'/a//b///c') == '/a/b/c'

    def test_absolute_paths(self):
        assert Path.parse(b'/example') == '/example'
        assert Path.parse(b'/this/is/valid') == '/this/is/valid'

    def test_rootless_paths(self):
        assert Path.parse(b'this:is:@') == 'this:is:@'
        assert Path.parse(b'this:is:@/') == 'this:is:@/'
        assert Path.parse(b'this:is:@/valid') == 'this:is:@/valid'

    def test_percent_encoded_segments(self):
        assert Path.parse(b'/a%20b/%2F') == '/a%20b/%2F'

    @pytest.mark.parametrize('data', [b'/a%2fb', b'/a/%', b'/a b', b'/a?b'])
    def test_invalid_segment_is_a_bad_request(self, data):
        with pytest.raises(BadRequest):
            Path.parse(data)


class TestQueryAndFragment(object):
    @pytest.mark.parametrize('cls', [Query, Fragment])
    def test_valid_values(self, cls):
        assert cls.parse(b'') == ''
        assert cls.parse(b'name=ferret') == 'name=ferret'
        assert cls.parse(b'a=1&b=/c?d:e@f') == 'a=1&b=/c?d:e@f'
        assert cls.parse(b'%3D%3D') == '%3D%3D'

    @pytest.mark.parametrize('cls', [Query, Fragment])
    @pytest.mark.parametrize('data', [b'a#b', b'a b', b'%3d', b'%', b'[x]'])
    def test_invalid_values_are_bad_requests(self, cls, data):
        with pytest.raises(BadRequest):
            cls.parse(data)

    def test_defaults_are_empty(self):
        assert Query() == ''
        assert Fragment() == ''


class TestUri(object):
    def test_empty_input_is_a_bad_request(self):
        with pytest.raises(BadRequest):
            Uri.parse(b'')

    def test_authority_without_terminator_is_a_bad_request(self):
        with pytest.raises(BadRequest):
            Uri.parse(b'http://example.com')

    def test_double_hash_is_a_bad_request(self):
        with pytest.raises(BadRequest):
            Uri.parse(b'http://example.com/#sss#sh')

    def test_query_with_hash_in_fragment_is_a_bad_request(self):
        with pytest.raises(BadRequest):
            Uri.parse(b'/p?q#f#g')

    def test_single_slash_is_valid(self):
        assert Uri.parse(b'/') == Uri(path=Path('/'))

    def test_full_uri(self):
        uri = Uri.parse(b'foo://example.com:8042/over/there?name=ferret#nose')

        assert uri.scheme == 'foo'
        assert uri.authority == Authority(None, Host.domain('example.com'), 8042)
        assert uri.path == '/over/there'
        assert uri.query == 'name=ferret'
        assert uri.fragment == 'nose'

    def test_scheme_can_be_empty(self):
        uri = Uri.parse(b'://example.com:8042/over/there?name=ferret#nose')

        assert uri.scheme == ''
        assert uri.authority.port == 8042
        assert uri.path == '/over/there'

    def test_scheme_is_lower_cased(self):
        assert Uri.parse(b'HTTP://example.com/').scheme == 'http'

    def test_authority_can_be_followed_by_query_or_fragment(self):
        uri = Uri.parse(b'foo://example.com:8042?name=ferret#nose')
        assert uri.path == ''
        assert uri.query == 'name=ferret'
        assert uri.fragment == 'nose'

        uri = Uri.parse(b'foo://example.com:8042#nose')
        assert uri.path == ''
        assert uri.query == ''
        assert uri.fragment == 'nose'

    def test_authority_with_slash_path(self):
        uri = Uri.parse(b'foo://example.com:8042/')

        assert uri.authority is not None
        assert uri.path == '/'

    def test_authority_is_optional(self):
        uri = Uri.parse(b'foo:/over/there?name=ferret#nose')

        assert uri.authority is None
        assert uri.path == '/over/there'

    def test_origin_form_target(self):
        uri = Uri.parse(b'/where?q=now')

        assert uri == Uri(path=Path('/where'), query=Query('q=now'))

    def test_bare_delimiters_give_empty_components(self):
        assert Uri.parse(b'/p?') == Uri(path=Path('/p'))
        assert Uri.parse(b'/p#') == Uri(path=Path('/p'))
        assert Uri.parse(b'/p?q#') == Uri(path=Path('/p'), query=Query('q'))
        assert Uri.parse(b'/p?#f') == Uri(path=Path('/p'), fragment=Fragment('f'))

    def test_invalid_component_is_a_bad_request(self):
        for data in [b'1http://a/', b'http://a b/', b'http://a/%zz',
                     b'/p?%', b'/p#%']:
            with pytest.raises(BadRequest):
                Uri.parse(data)

    def test_colon_in_origin_form_is_read_as_a_scheme(self):
        with pytest.raises(BadRequest):
            Uri.parse(b'/a:b')

    def test_path_slashes_are_folded(self):
        assert Uri.parse(b'http://example.com/a//b//').path == '/a/b/'

    def test_empty_first_segment_after_authority_is_a_bad_request(self):
        with pytest.raises(BadRequest):
            Uri.parse(b'http://example.com//a')

    def test_ipv6_authority(self):
        uri = Uri.parse(b'http://[2001:db8::7]:8080/c=GB?objectClass?one')

        assert uri.authority.host == Host.ipvn('2001:db8::7')
        assert uri.authority.port == 8080
        assert uri.query == 'objectClass?one'

    def test_to_reference(self):
        uri = Uri.parse(b'foo://example.com:8042/over/there?name=ferret#nose')
        reference = uri.to_reference()

        assert isinstance(reference, rfc3986.URIReference)
        assert reference.scheme == 'foo'
        assert reference.authority == 'example.com:8042'
        assert reference.path == '/over/there'
        assert reference.query == 'name=ferret'
        assert reference.fragment == 'nose'

    @pytest.mark.parametrize('data', [
        b'foo://example.com:8042/over/there?name=ferret#nose',
        b'http://user@[::1]:80/',
        b'/a/b?c',
        b'foo:/over/there',
        b'://example.com:8042/over',
        b'http://example.com?',
        b'http://example.com?q',
        b'http://example.com#f',
    ])
    def test_unsplit_round_trips(self, data):
        uri = Uri.parse(data)
        rendered = uri.unsplit()

        assert rendered.encode('ascii') == data
        assert Uri.parse(rendered) == uri

    @pytest.mark.parametrize('data', [
        b'http://example.com?',
        b'http://example.com#',
        b'http://example.com?#',
    ])
    def test_bare_authority_keeps_a_terminator(self, data):
        uri = Uri.parse(data)

        assert uri.path == ''
        assert uri.unsplit() == 'http://example.com?'
        assert Uri.parse(uri.unsplit()) == uri

    def test_constructed_bare_authority_renders_terminated(self):
        uri = Uri(Scheme('http'), Authority(None, Host.domain('example.com')))

        assert uri.unsplit() == 'http://example.com?'
        assert Uri.parse(uri.unsplit()) == uri
