from flask import Flask, request
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import copy
import os

from .constants import DEFAULT_JSON_NAME
from .middleware import SiteHostMiddleware, point_entry_document_at, use_swagger
from .options import SwaggerOptions
from .resources import ResourceTable

load_dotenv()

__all__ = ["create_app", "use_swagger", "SiteHostMiddleware", "SwaggerOptions", "ResourceTable"]


def create_app(
    config: Optional[Dict[str, Any]] = None,
    options: Optional[SwaggerOptions] = None,
    resources: Optional[ResourceTable] = None,
):
    app = Flask(__name__)

    app.config['SWAGGER_TITLE'] = os.getenv('SWAGGER_TITLE', 'API')
    app.config['SWAGGER_DESCRIPTION'] = os.getenv('SWAGGER_DESCRIPTION', '')
    app.config['SWAGGER_VERSION'] = os.getenv('SWAGGER_VERSION', '1.0.0')
    app.config['SWAGGER_BASE_PATH'] = os.getenv('SWAGGER_BASE_PATH', '/api')
    app.config['SWAGGER_JSON_NAME'] = os.getenv('SWAGGER_JSON_NAME', 'swagger.json')
    app.config['SWAGGER_XML_DOC_PATH'] = os.getenv('SWAGGER_XML_DOC_PATH')
    app.config['SWAGGER_FORCE_SCHEMAS'] = os.getenv('SWAGGER_FORCE_SCHEMAS', '')

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    if options is None:
        options = SwaggerOptions.from_config(app.config)

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            payload = {
                'error': {
                    'status': e.code,
                    'title': e.name,
                    'detail': e.description,
                }
            }
            return payload, e.code
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    # Generated document; the bundled UI loads it by name
    from .swagger import build_document, paths_from_app

    def swagger_document():
        host = options.custom_host(request) if options.custom_host else request.host
        paths = paths_from_app(app, options.api_base_path, exclude=['swagger_document'])
        return build_document(options, paths=paths, host=host).to_dict()

    app.add_url_rule('/' + options.json_name.lstrip('/'), 'swagger_document', swagger_document)

    if options.json_name.lstrip('/') != DEFAULT_JSON_NAME:
        # bundled index.html requests the default document name
        options = copy.copy(options)
        options.resolve_custom_resource = point_entry_document_at(options.json_name, options.resolve_custom_resource)

    # Embedded UI assets are answered before Flask routing; misses fall through
    use_swagger(app, options, resources)

    return app
