from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import Node, extensions, prop


@dataclass
class ExternalDocs(Node):
    description: Optional[str] = None
    url: Optional[str] = None


@dataclass
class Xml(Node):
    name: Optional[str] = None
    namespace: Optional[str] = None
    prefix: Optional[str] = None
    attribute: Optional[bool] = None
    wrapped: Optional[bool] = None


@dataclass
class PartialSchema(Node):
    """Primitive schema subset shared by non-body parameters and headers."""
    type: Optional[str] = None
    format: Optional[str] = None
    items: Optional[PartialSchema] = None
    collection_format: Optional[str] = prop('collectionFormat')
    default: Optional[Any] = None
    maximum: Optional[float] = None
    exclusive_maximum: Optional[bool] = prop('exclusiveMaximum')
    minimum: Optional[float] = None
    exclusive_minimum: Optional[bool] = prop('exclusiveMinimum')
    max_length: Optional[int] = prop('maxLength')
    min_length: Optional[int] = prop('minLength')
    pattern: Optional[str] = None
    max_items: Optional[int] = prop('maxItems')
    min_items: Optional[int] = prop('minItems')
    unique_items: Optional[bool] = prop('uniqueItems')
    enum: Optional[List[Any]] = None
    multiple_of: Optional[float] = prop('multipleOf')
    vendor_extensions: Dict[str, Any] = extensions()


@dataclass
class Schema(Node):
    ref: Optional[str] = prop('$ref')
    format: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    default: Optional[Any] = None
    multiple_of: Optional[float] = prop('multipleOf')
    maximum: Optional[float] = None
    exclusive_maximum: Optional[bool] = prop('exclusiveMaximum')
    minimum: Optional[float] = None
    exclusive_minimum: Optional[bool] = prop('exclusiveMinimum')
    max_length: Optional[int] = prop('maxLength')
    min_length: Optional[int] = prop('minLength')
    pattern: Optional[str] = None
    max_items: Optional[int] = prop('maxItems')
    min_items: Optional[int] = prop('minItems')
    unique_items: Optional[bool] = prop('uniqueItems')
    max_properties: Optional[int] = prop('maxProperties')
    min_properties: Optional[int] = prop('minProperties')
    required: Optional[List[str]] = None
    enum: Optional[List[Any]] = None
    type: Optional[str] = None
    items: Optional[Schema] = None
    all_of: Optional[List[Schema]] = prop('allOf')
    properties: Optional[Dict[str, Schema]] = None
    additional_properties: Optional[Schema] = prop('additionalProperties')
    discriminator: Optional[str] = None
    read_only: Optional[bool] = prop('readOnly')
    xml: Optional[Xml] = None
    external_docs: Optional[ExternalDocs] = prop('externalDocs')
    example: Optional[Any] = None
    vendor_extensions: Dict[str, Any] = extensions()


__all__ = ["ExternalDocs", "Xml", "PartialSchema", "Schema"]
