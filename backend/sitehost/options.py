from __future__ import annotations
from typing import Callable, Iterable, List, Optional

from werkzeug.wrappers import Request

from sitehost.constants import DEFAULT_JSON_NAME
from sitehost.models import Info

# (normalized path, embedded bytes or None) -> bytes to serve, or None to delegate
ResourceResolver = Callable[[str, Optional[bytes]], Optional[bytes]]
HostProvider = Callable[[Request], str]


class SwaggerOptions:
    """Per-mount configuration, set once before the first request.

    Parameters:
      title / description: document info metadata
      api_base_path: base path of the described API (emitted as basePath)
      version: optional info.version
      resolve_custom_resource: hook that may override, supply or veto an asset
      custom_host: returns the host name written into the generated document
      xml_document_path: XML documentation file used to fill summaries
      json_name: file name of the generated document
      force_schemas: type names always present in `definitions`
    """

    def __init__(
        self,
        title: str,
        description: str,
        api_base_path: str,
        *,
        version: Optional[str] = None,
        resolve_custom_resource: Optional[ResourceResolver] = None,
        custom_host: Optional[HostProvider] = None,
        xml_document_path: Optional[str] = None,
        json_name: str = DEFAULT_JSON_NAME,
        force_schemas: Optional[Iterable[str]] = None,
    ):
        self.api_base_path = api_base_path
        self.info = Info(title=title, description=description, version=version)
        self.resolve_custom_resource = resolve_custom_resource
        self.custom_host = custom_host
        self.xml_document_path = xml_document_path
        self.json_name = json_name
        self.force_schemas: List[str] = list(force_schemas or [])

    @classmethod
    def from_config(cls, config) -> 'SwaggerOptions':
        """Build options from a Flask config mapping (SWAGGER_* keys)."""
        raw_force = config.get('SWAGGER_FORCE_SCHEMAS') or ''
        if isinstance(raw_force, str):
            force = [name.strip() for name in raw_force.split(',') if name.strip()]
        else:
            force = list(raw_force)
        return cls(
            config.get('SWAGGER_TITLE', 'API'),
            config.get('SWAGGER_DESCRIPTION', ''),
            config.get('SWAGGER_BASE_PATH', '/api'),
            version=config.get('SWAGGER_VERSION') or None,
            xml_document_path=config.get('SWAGGER_XML_DOC_PATH') or None,
            json_name=config.get('SWAGGER_JSON_NAME') or DEFAULT_JSON_NAME,
            force_schemas=force,
        )


__all__ = ["SwaggerOptions", "ResourceResolver", "HostProvider"]
