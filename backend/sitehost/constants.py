"""Centralized constants for the site host middleware.

Splitting these out keeps `middleware.py` and `resources.py` concise. Tests
depend on the exact MIME table below.
"""
from typing import Dict

# Entry document served for the mount root
DEFAULT_DOCUMENT = "index.html"

# Package and directory that hold the bundled UI assets
SITE_PACKAGE = "sitehost"
SITE_DIRECTORY = "site"

# Namespaced resource names: "<package>.<directory>.<path with / -> .>"
RESOURCE_PREFIX = f"{SITE_PACKAGE}.{SITE_DIRECTORY}."

DEFAULT_JSON_NAME = "swagger.json"

DEFAULT_MIME_TYPE = "text/html"

MIME_TYPES: Dict[str, str] = {
    "css": "text/css",
    "js": "text/javascript",
    "json": "application/json",
    "gif": "image/gif",
    "png": "image/png",
    "eot": "application/vnd.ms-fontobject",
    "woff": "application/font-woff",
    "woff2": "application/font-woff2",
    "otf": "application/font-sfnt",
    "ttf": "application/font-sfnt",
    "svg": "image/svg+xml",
    "ico": "image/x-icon",
}

__all__ = [
    "DEFAULT_DOCUMENT",
    "SITE_PACKAGE",
    "SITE_DIRECTORY",
    "RESOURCE_PREFIX",
    "DEFAULT_JSON_NAME",
    "DEFAULT_MIME_TYPE",
    "MIME_TYPES",
]
