"""Read-only table of the embedded UI assets.

Assets are addressed by a namespaced logical name derived from their path
inside the bundle (`css/site.css` -> `sitehost.site.css.site.css`). The table
is built once at startup and shared by every request.
"""
from __future__ import annotations
from importlib import resources as importlib_resources
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from sitehost.constants import DEFAULT_DOCUMENT, RESOURCE_PREFIX, SITE_DIRECTORY, SITE_PACKAGE


def normalize_path(raw_path: Optional[str]) -> str:
    """Strip surrounding separators; the mount root maps to the entry document."""
    path = (raw_path or '').strip('/')
    return path or DEFAULT_DOCUMENT


class ResourceTable(Mapping[str, bytes]):
    def __init__(self, entries: Mapping[str, bytes], prefix: str = RESOURCE_PREFIX):
        self.prefix = prefix
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_package(cls, package: str = SITE_PACKAGE, directory: str = SITE_DIRECTORY) -> 'ResourceTable':
        """Load every file below `package/directory` into memory."""
        prefix = f"{package}.{directory}."
        root = importlib_resources.files(package).joinpath(directory)
        entries: Dict[str, bytes] = {}
        pending = [(root, '')]
        while pending:
            node, rel = pending.pop()
            for child in node.iterdir():
                child_rel = f"{rel}/{child.name}" if rel else child.name
                if child.is_dir():
                    pending.append((child, child_rel))
                elif child.is_file():
                    entries[prefix + child_rel.replace('/', '.')] = child.read_bytes()
        return cls(entries, prefix)

    @classmethod
    def from_files(cls, files: Mapping[str, bytes], prefix: str = RESOURCE_PREFIX) -> 'ResourceTable':
        """Build a table from bundle-relative paths, e.g. {'css/site.css': b'...'}."""
        return cls({prefix + path.strip('/').replace('/', '.'): data for path, data in files.items()}, prefix)

    def resource_name(self, path: str) -> str:
        return self.prefix + path.replace('/', '.')

    def lookup(self, path: str) -> Optional[bytes]:
        return self._entries.get(self.resource_name(path))

    def __getitem__(self, name: str) -> bytes:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["normalize_path", "ResourceTable"]
