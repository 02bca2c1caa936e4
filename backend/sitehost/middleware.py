"""WSGI middleware serving the bundled documentation UI.

Each request path is normalized and looked up in the resource table. An
optional resolver hook gets the final word on the payload. A hit is written
with status 200 and a content type inferred from the extension. A miss hands
the untouched environ to the wrapped application, and its response goes back
unchanged.
"""
from __future__ import annotations
import json
import logging
from typing import Iterable, Optional

from werkzeug.wrappers import Request, Response

from sitehost.constants import DEFAULT_DOCUMENT, DEFAULT_JSON_NAME
from sitehost.options import ResourceResolver, SwaggerOptions
from sitehost.resources import ResourceTable, normalize_path
from sitehost.utils.mime import get_mime_type

log = logging.getLogger(__name__)


class SiteHostMiddleware:
    def __init__(self, app, options: SwaggerOptions, resources: Optional[ResourceTable] = None):
        self.app = app
        self.options = options
        self.resources = resources if resources is not None else ResourceTable.from_package()

    def resolve(self, path: str) -> Optional[bytes]:
        """Return the payload for a normalized path, or None to delegate."""
        embedded = self.resources.lookup(path)
        hook = self.options.resolve_custom_resource
        if hook is None:
            return embedded
        return hook(path, embedded)

    def __call__(self, environ, start_response) -> Iterable[bytes]:
        request = Request(environ)
        path = normalize_path(request.path)
        name = self.resources.resource_name(path)
        log.debug("site resource %s", name)
        payload = self.resolve(path)
        if payload is None:
            return self.app(environ, start_response)
        response = Response(payload, status=200, content_type=get_mime_type(path))
        return response(environ, start_response)


def point_entry_document_at(json_name: str, hook: Optional[ResourceResolver] = None) -> ResourceResolver:
    """Resolver that makes the bundled entry page load `json_name`.

    The rewrite is applied to the embedded bytes before `hook` sees them, so a
    user hook keeps the final word.
    """
    target = json.dumps(json_name.lstrip('/')).encode()
    default = json.dumps(DEFAULT_JSON_NAME).encode()

    def resolve(path: str, embedded: Optional[bytes]) -> Optional[bytes]:
        if path == DEFAULT_DOCUMENT and embedded is not None:
            embedded = embedded.replace(default, target)
        return hook(path, embedded) if hook is not None else embedded

    return resolve


def use_swagger(app, options: SwaggerOptions, resources: Optional[ResourceTable] = None):
    """Mount the site host in front of a Flask app's WSGI pipeline."""
    app.wsgi_app = SiteHostMiddleware(app.wsgi_app, options, resources)
    app.extensions['sitehost'] = options
    return app


__all__ = ["SiteHostMiddleware", "point_entry_document_at", "use_swagger"]
