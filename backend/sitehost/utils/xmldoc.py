from __future__ import annotations
"""Reader for .NET-style XML documentation files.

Expected shape:
    <doc>
      <members>
        <member name="T:Shop.Models.Product"><summary>A product.</summary></member>
        <member name="M:Shop.Api.ListProducts(System.Int32)"><summary>...</summary></member>
      </members>
    </doc>

Members are keyed by short name (`Product`, `ListProducts`): the kind prefix,
namespace and argument list are dropped.
"""
from typing import Dict
import xml.etree.ElementTree as ET


def member_short_name(member_name: str) -> str:
    name = member_name.split(':', 1)[-1]
    name = name.split('(', 1)[0]
    return name.rsplit('.', 1)[-1]


def read_member_summaries(path: str) -> Dict[str, str]:
    tree = ET.parse(path)
    summaries: Dict[str, str] = {}
    for member in tree.getroot().iter('member'):
        name = member.get('name')
        summary = member.find('summary')
        if not name or summary is None:
            continue
        text = ' '.join(''.join(summary.itertext()).split())
        if text:
            summaries[member_short_name(name)] = text
    return summaries

__all__ = ['member_short_name', 'read_member_summaries']
