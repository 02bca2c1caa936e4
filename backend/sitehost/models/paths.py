from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from .base import Node, extensions, prop
from .schema import ExternalDocs, PartialSchema, Schema


@dataclass
class Header(Node):
    _embedded: ClassVar[Tuple[str, ...]] = ('partial',)

    description: Optional[str] = None
    partial: Optional[PartialSchema] = None


@dataclass
class Response(Node):
    description: Optional[str] = None
    schema: Optional[Schema] = None
    headers: Optional[Dict[str, Header]] = None
    examples: Optional[Any] = None
    vendor_extensions: Dict[str, Any] = extensions()


@dataclass
class Parameter(Node):
    """Operation parameter.

    Body parameters carry `schema`; every other location describes its value
    with the flattened `partial` schema (type, format, items, ...).
    """
    _embedded: ClassVar[Tuple[str, ...]] = ('partial',)

    ref: Optional[str] = prop('$ref')
    name: Optional[str] = None
    in_: Optional[str] = prop('in')
    description: Optional[str] = None
    required: Optional[bool] = None
    schema: Optional[Schema] = None
    partial: Optional[PartialSchema] = None


@dataclass
class Operation(Node):
    tags: Optional[List[str]] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    external_docs: Optional[ExternalDocs] = prop('externalDocs')
    operation_id: Optional[str] = prop('operationId')
    consumes: Optional[List[str]] = None
    produces: Optional[List[str]] = None
    parameters: Optional[List[Parameter]] = None
    responses: Optional[Dict[str, Response]] = None
    schemes: Optional[List[str]] = None
    deprecated: Optional[bool] = None
    security: Optional[List[Dict[str, List[str]]]] = None
    vendor_extensions: Dict[str, Any] = extensions()


HTTP_METHODS = ('get', 'put', 'post', 'delete', 'options', 'head', 'patch')


@dataclass
class PathItem(Node):
    ref: Optional[str] = prop('$ref')
    get: Optional[Operation] = None
    put: Optional[Operation] = None
    post: Optional[Operation] = None
    delete: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    patch: Optional[Operation] = None
    parameters: Optional[List[Parameter]] = None
    vendor_extensions: Dict[str, Any] = extensions()

    def operations(self) -> Dict[str, Operation]:
        """Populated operations keyed by lowercase method, in declaration order."""
        return {m: getattr(self, m) for m in HTTP_METHODS if getattr(self, m) is not None}


__all__ = ["Header", "Response", "Parameter", "Operation", "PathItem", "HTTP_METHODS"]
