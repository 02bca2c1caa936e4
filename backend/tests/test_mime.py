import pytest
from sitehost.utils.mime import get_mime_type


@pytest.mark.parametrize('path,expected', [
    ('style.css', 'text/css'),
    ('app.js', 'text/javascript'),
    ('swagger.json', 'application/json'),
    ('anim.gif', 'image/gif'),
    ('logo.png', 'image/png'),
    ('font.eot', 'application/vnd.ms-fontobject'),
    ('font.woff', 'application/font-woff'),
    ('font.woff2', 'application/font-woff2'),
    ('font.otf', 'application/font-sfnt'),
    ('font.ttf', 'application/font-sfnt'),
    ('icons.svg', 'image/svg+xml'),
    ('icon.ico', 'image/x-icon'),
])
def test_known_extensions(path, expected):
    assert get_mime_type(path) == expected


@pytest.mark.parametrize('path', ['index.html', 'readme.txt', 'archive.tar.gz', 'docs', 'LICENSE', ''])
def test_unrecognized_or_missing_extension_is_html(path):
    assert get_mime_type(path) == 'text/html'


def test_last_dot_segment_wins():
    assert get_mime_type('swagger-ui.min.js') == 'text/javascript'
    assert get_mime_type('vendor/app.js.map') == 'text/html'
    # directory dots do not leak into the file name
    assert get_mime_type('v1.css/readme') == 'text/html'


def test_namespaced_resource_names():
    assert get_mime_type('sitehost.site.css.site.css') == 'text/css'
    assert get_mime_type('sitehost.site.docs') == 'text/html'


def test_extension_match_is_case_sensitive():
    assert get_mime_type('STYLE.CSS') == 'text/html'
