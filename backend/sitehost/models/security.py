from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import Node, extensions, prop


@dataclass
class SecurityScheme(Node):
    type: Optional[str] = None
    description: Optional[str] = None
    name: Optional[str] = None
    in_: Optional[str] = prop('in')
    flow: Optional[str] = None
    authorization_url: Optional[str] = prop('authorizationUrl')
    token_url: Optional[str] = prop('tokenUrl')
    scopes: Optional[Dict[str, str]] = None
    vendor_extensions: Dict[str, Any] = extensions()


__all__ = ["SecurityScheme"]
