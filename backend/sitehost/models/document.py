from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import Node, extensions, prop
from .paths import Parameter, PathItem, Response
from .schema import ExternalDocs, Schema
from .security import SecurityScheme

SWAGGER_VERSION = "2.0"


@dataclass
class Contact(Node):
    name: Optional[str] = None
    url: Optional[str] = None
    email: Optional[str] = None


@dataclass
class License(Node):
    name: Optional[str] = None
    url: Optional[str] = None


@dataclass
class Info(Node):
    version: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    terms_of_service: Optional[str] = prop('termsOfService')
    contact: Optional[Contact] = None
    license: Optional[License] = None
    vendor_extensions: Dict[str, Any] = extensions()


@dataclass
class Tag(Node):
    name: Optional[str] = None
    description: Optional[str] = None
    external_docs: Optional[ExternalDocs] = prop('externalDocs')
    vendor_extensions: Dict[str, Any] = extensions()


@dataclass
class SwaggerDocument(Node):
    """Root of a Swagger 2.0 document. `swagger` is fixed and always emitted."""
    swagger: str = field(default=SWAGGER_VERSION, init=False)
    info: Optional[Info] = None
    host: Optional[str] = None
    base_path: Optional[str] = prop('basePath')
    schemes: Optional[List[str]] = None
    consumes: Optional[List[str]] = None
    produces: Optional[List[str]] = None
    paths: Optional[Dict[str, PathItem]] = None
    definitions: Optional[Dict[str, Schema]] = None
    parameters: Optional[Dict[str, Parameter]] = None
    responses: Optional[Dict[str, Response]] = None
    security_definitions: Optional[Dict[str, SecurityScheme]] = prop('securityDefinitions')
    security: Optional[List[Dict[str, List[str]]]] = None
    tags: Optional[List[Tag]] = None
    external_docs: Optional[ExternalDocs] = prop('externalDocs')
    vendor_extensions: Dict[str, Any] = extensions()


__all__ = ["SWAGGER_VERSION", "Contact", "License", "Info", "Tag", "SwaggerDocument"]
