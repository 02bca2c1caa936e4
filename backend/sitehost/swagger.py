"""Public import for the Swagger document builder.

Keeps a stable import path while the implementation lives in
`swagger_builder.py`.
"""
from .swagger_builder import build_document, paths_from_app, serialize_document, write_document  # noqa: F401

__all__ = ["build_document", "paths_from_app", "serialize_document", "write_document"]
