import pytest

from services.useragent import is_iphone, supports_vector_icons

MODERN_UA = ('Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 '
             '(KHTML, like Gecko) Chrome/120.0 Safari/537.36')
IE7_UA = 'Mozilla/4.0 (compatible; MSIE 7.0; Windows NT 6.0)'
IPHONE_UA = 'Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15'


@pytest.mark.parametrize('ua', [
    IE7_UA,
    'Mozilla/4.0 (compatible; MSIE 6.0; Windows NT 5.1)',
    'Mozilla/4.0 (compatible; MSIE 8.0; Windows NT 6.1; Trident/4.0)',
    'Mozilla/5.0 (Linux; U; Android 2.3.4; en-us; Nexus S Build/GRJ22) AppleWebKit/533.1',
])
def test_legacy_clients_get_raster(ua):
    assert supports_vector_icons(ua) is False


@pytest.mark.parametrize('ua', [MODERN_UA, IPHONE_UA, '', None, 'curl/8.4.0'])
def test_everyone_else_gets_vector(ua):
    assert supports_vector_icons(ua) is True


def test_msie_9_is_not_denied():
    assert supports_vector_icons('Mozilla/5.0 (compatible; MSIE 9.0; Windows NT 6.1)') is True


def test_is_iphone():
    assert is_iphone(IPHONE_UA)
    assert not is_iphone(MODERN_UA)
    assert not is_iphone(None)
