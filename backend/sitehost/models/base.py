"""Shared serialization for Swagger document nodes.

Nodes are plain dataclasses. Field metadata carries the JSON key when it
differs from the attribute name (`ref` -> `$ref`, `operation_id` ->
`operationId`). Rules:

- a field left at None is omitted from output;
- `vendor_extensions` entries are written inline beside the regular keys and
  must start with `x-`;
- fields listed in `_embedded` hold a sub-node whose keys are flattened into
  the parent object (used for the partial schema shared by parameters and
  headers). An empty embedded part is stored as None.
"""
from __future__ import annotations
import dataclasses
import typing
from typing import Any, ClassVar, Dict, Optional, Tuple, Type, TypeVar

N = TypeVar('N', bound='Node')

EXTENSIONS_FIELD = 'vendor_extensions'
EXTENSION_PREFIX = 'x-'


def prop(key: Optional[str] = None, default: Any = None):
    """Optional node field, serialized under `key` when given."""
    metadata = {'json': key} if key else {}
    return dataclasses.field(default=default, metadata=metadata)


def extensions():
    return dataclasses.field(default_factory=dict)


def _check_extensions(ext: Dict[str, Any]) -> None:
    bad = [k for k in ext if not k.startswith(EXTENSION_PREFIX)]
    if bad:
        raise ValueError(f"vendor extension keys must start with {EXTENSION_PREFIX!r}: {bad}")


def _json_key(f: dataclasses.Field) -> str:
    return f.metadata.get('json', f.name)


def _dump(value: Any) -> Any:
    if isinstance(value, Node):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_dump(v) for v in value]
    if isinstance(value, dict):
        return {k: _dump(v) for k, v in value.items()}
    return value


def _unwrap_optional(tp: Any) -> Any:
    if typing.get_origin(tp) is typing.Union:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _load(tp: Any, value: Any) -> Any:
    if value is None:
        return None
    tp = _unwrap_optional(tp)
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin is list and args and isinstance(value, list):
        return [_load(args[0], v) for v in value]
    if origin is dict and len(args) == 2 and isinstance(value, dict):
        return {k: _load(args[1], v) for k, v in value.items()}
    if isinstance(tp, type) and issubclass(tp, Node) and isinstance(value, dict):
        return tp.from_dict(value)
    return value


class Node:
    _embedded: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self):
        for name in self._embedded:
            part = getattr(self, name)
            if part is not None and part == type(part)():
                setattr(self, name, None)
        _check_extensions(getattr(self, EXTENSIONS_FIELD, {}))

    @classmethod
    def _hints(cls) -> Dict[str, Any]:
        return typing.get_type_hints(cls)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in dataclasses.fields(self):
            if f.name == EXTENSIONS_FIELD:
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            if f.name in self._embedded:
                out.update(value.to_dict())
                continue
            out[_json_key(f)] = _dump(value)
        _check_extensions(getattr(self, EXTENSIONS_FIELD, {}))
        for key, value in getattr(self, EXTENSIONS_FIELD, {}).items():
            out[key] = _dump(value)
        return out

    @classmethod
    def _load_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        hints = cls._hints()
        kwargs: Dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            if not f.init or f.name == EXTENSIONS_FIELD:
                continue
            tp = _unwrap_optional(hints[f.name])
            if f.name in cls._embedded:
                # the embedded part owns its vendor extensions
                part = tp.from_dict(data)
                if part != tp():
                    kwargs[f.name] = part
                continue
            key = _json_key(f)
            if key in data:
                kwargs[f.name] = _load(tp, data[key])
        return kwargs

    @classmethod
    def from_dict(cls: Type[N], data: Dict[str, Any]) -> N:
        kwargs = cls._load_fields(data)
        if any(f.name == EXTENSIONS_FIELD for f in dataclasses.fields(cls)):
            kwargs[EXTENSIONS_FIELD] = {k: v for k, v in data.items() if k.startswith(EXTENSION_PREFIX)}
        return cls(**kwargs)


__all__ = ["Node", "prop", "extensions"]
