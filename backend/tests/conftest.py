import os, sys, pytest
# Ensure backend directory is on path so 'sitehost' and 'scripts' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from werkzeug.wrappers import Request, Response
from sitehost import create_app
from sitehost.resources import ResourceTable

SITE_FILES = {
    'index.html': b'<html><body>docs</body></html>',
    'css/site.css': b'body { margin: 0; }',
    'js/app.js': b'console.log("ui");',
    'img/logo.png': b'\x89PNG\r\n\x1a\n\x00\x00',
    'fonts/icons.woff2': b'wOF2\x00\x01',
}


@Request.application
def downstream_app(request):
    # Stand-in for the next handler; the odd status proves it is returned untouched
    return Response(f'next:{request.path}', status=418, content_type='text/plain')


@pytest.fixture()
def site_files():
    return dict(SITE_FILES)


@pytest.fixture()
def resources():
    return ResourceTable.from_files(SITE_FILES)


@pytest.fixture(scope='session', autouse=True)
def app_instance():
    app = create_app()
    yield app


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()
