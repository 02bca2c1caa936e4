"""Swagger 2.0 document builder.

Scope:
- Document metadata (info, host, basePath) from SwaggerOptions
- Paths reflected from a Flask URL map, or supplied by the caller
- Forced definitions and XML documentation summaries
- Deterministic JSON output written under the configured document name

This is the canonical builder module; `sitehost/swagger.py` re-exports from here.
"""
from __future__ import annotations
import copy
import inspect
import json
import pathlib
import re
from typing import Dict, Iterable, List, Optional

from sitehost.models import Operation, Parameter, PartialSchema, PathItem, Response, Schema, SwaggerDocument, Tag
from sitehost.options import SwaggerOptions
from sitehost.utils.xmldoc import read_member_summaries

__all__ = ["build_document", "paths_from_app", "serialize_document", "write_document"]

_RULE_VAR = re.compile(r"<(?:(\w+)(?:\([^)]*\))?:)?(\w+)>")
_SKIPPED_METHODS = {'HEAD', 'OPTIONS'}
_CONVERTER_SCHEMAS = {
    'int': ('integer', None),
    'float': ('number', 'float'),
    'uuid': ('string', 'uuid'),
}


def _converter_schema(converter: Optional[str]) -> PartialSchema:
    type_, format_ = _CONVERTER_SCHEMAS.get(converter or '', ('string', None))
    return PartialSchema(type=type_, format=format_)


def _summary(view) -> Optional[str]:
    doc = inspect.getdoc(view) if view is not None else None
    if not doc:
        return None
    return doc.strip().splitlines()[0]


def _relative(rule: str, base_path: str) -> Optional[str]:
    base = '/' + base_path.strip('/') if base_path.strip('/') else ''
    if not base:
        return rule
    if rule == base:
        return '/'
    if rule.startswith(base + '/'):
        return rule[len(base):]
    return None


def paths_from_app(app, base_path: str, exclude: Iterable[str] = ()) -> Dict[str, PathItem]:
    """Reflect the app's URL rules under `base_path` into path items."""
    skip = {'static', *exclude}
    paths: Dict[str, PathItem] = {}
    for rule in sorted(app.url_map.iter_rules(), key=lambda r: (r.rule, r.endpoint)):
        if rule.endpoint in skip:
            continue
        rel = _relative(rule.rule, base_path)
        if rel is None:
            continue
        swagger_path = _RULE_VAR.sub(r"{\2}", rel)
        params = [
            Parameter(name=arg, in_='path', required=True, partial=_converter_schema(conv))
            for conv, arg in _RULE_VAR.findall(rel)
        ]
        methods = sorted(m for m in (rule.methods or ()) if m not in _SKIPPED_METHODS)
        segment = swagger_path.strip('/').split('/')[0]
        tag = segment.capitalize() if segment and not segment.startswith('{') else 'Default'
        item = paths.setdefault(swagger_path, PathItem())
        for method in methods:
            op_id = rule.endpoint if len(methods) == 1 else f"{rule.endpoint}_{method.lower()}"
            operation = Operation(
                tags=[tag],
                summary=_summary(app.view_functions.get(rule.endpoint)),
                operation_id=op_id,
                parameters=list(params) or None,
                responses={'200': Response(description='OK')},
            )
            setattr(item, method.lower(), operation)
    return paths


def _apply_xml_summaries(paths: Dict[str, PathItem], definitions: Dict[str, Schema], xml_path: str) -> None:
    summaries = read_member_summaries(xml_path)
    for name, schema in definitions.items():
        if schema.description is None and name in summaries:
            schema.description = summaries[name]
    for item in paths.values():
        for operation in item.operations().values():
            if operation.summary is None and operation.operation_id in summaries:
                operation.summary = summaries[operation.operation_id]


def _collect_tags(paths: Dict[str, PathItem]) -> List[Tag]:
    names = set()
    for item in paths.values():
        for operation in item.operations().values():
            names.update(operation.tags or [])
    return [Tag(name=n) for n in sorted(names)]


def build_document(
    options: SwaggerOptions,
    paths: Optional[Dict[str, PathItem]] = None,
    definitions: Optional[Dict[str, Schema]] = None,
    host: Optional[str] = None,
    schemes: Optional[List[str]] = None,
) -> SwaggerDocument:
    paths = copy.deepcopy(dict(paths or {}))
    definitions = copy.deepcopy(dict(definitions or {}))
    for name in options.force_schemas:
        definitions.setdefault(name, Schema(type='object', title=name))

    if options.xml_document_path:
        _apply_xml_summaries(paths, definitions, options.xml_document_path)

    tags = _collect_tags(paths)
    return SwaggerDocument(
        info=copy.deepcopy(options.info),
        host=host,
        base_path=options.api_base_path,
        schemes=schemes,
        paths=paths,
        definitions=definitions or None,
        tags=tags or None,
    )


def serialize_document(document: SwaggerDocument) -> str:
    return json.dumps(document.to_dict(), indent=2, sort_keys=True) + '\n'


def write_document(document: SwaggerDocument, directory, json_name: str) -> pathlib.Path:
    out_path = pathlib.Path(directory) / json_name
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(serialize_document(document))
    return out_path
