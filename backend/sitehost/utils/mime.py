from __future__ import annotations
"""Content-type inference for bundled assets.

The extension is the last dot-segment of the final path component and is
matched case-sensitively, so `STYLE.CSS` falls back to the default.
"""
from sitehost.constants import DEFAULT_MIME_TYPE, MIME_TYPES


def get_mime_type(path: str) -> str:
    name = path.rsplit('/', 1)[-1]
    if '.' not in name:
        return DEFAULT_MIME_TYPE
    extension = name.rsplit('.', 1)[-1]
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)

__all__ = ['get_mime_type']
