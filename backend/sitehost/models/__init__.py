"""Swagger 2.0 document model.

Plain dataclass records; see `base.py` for the serialization rules.
"""
from .base import Node
from .document import SWAGGER_VERSION, Contact, Info, License, SwaggerDocument, Tag
from .paths import HTTP_METHODS, Header, Operation, Parameter, PathItem, Response
from .schema import ExternalDocs, PartialSchema, Schema, Xml
from .security import SecurityScheme

__all__ = [
    "Node",
    "SWAGGER_VERSION",
    "SwaggerDocument",
    "Info",
    "Contact",
    "License",
    "Tag",
    "PathItem",
    "Operation",
    "Parameter",
    "Response",
    "Header",
    "HTTP_METHODS",
    "Schema",
    "PartialSchema",
    "Xml",
    "ExternalDocs",
    "SecurityScheme",
]
