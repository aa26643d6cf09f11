"""
Shared clean-ups used by the normaliser.
Everything here is total: junk in, empty/None out, never an exception.
"""
from __future__ import annotations
import re
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

_TECH_SPLIT   = re.compile(r"[,|]")
_BULLET_SPLIT = re.compile(r"\n|•|-")

# ───────────────────────────────────────── coercion ──
def text(value: Any) -> Optional[str]:
    """A non-empty string, or None. Whitespace-only counts as text."""
    return value if isinstance(value, str) and value else None

def mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}

def records(value: Any) -> List[Mapping[str, Any]]:
    """List of sub-records; a missing list is [] and junk entries become {}."""
    if not isinstance(value, (list, tuple)):
        return []
    return [mapping(v) for v in value]

def strings(value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [v for v in value if isinstance(v, str)]

# ───────────────────────────────────────── splitting ──
def _pieces(pattern: re.Pattern, raw: Any) -> List[str]:
    return [p.strip() for p in pattern.split(text(raw) or "") if p.strip()]

def split_tech_stack(raw: Any) -> List[str]:
    """"React, Node.js|AWS" -> ["React", "Node.js", "AWS"]"""
    return _pieces(_TECH_SPLIT, raw)

def split_bullets(raw: Any) -> List[str]:
    # a hyphen anywhere splits, "Node-RED" included
    return _pieces(_BULLET_SPLIT, raw)

def join_present(parts: Iterable[Any], sep: str) -> Optional[str]:
    return sep.join(p for p in parts if text(p)) or None

def date_range(start: Any, end: Any) -> Optional[str]:
    return join_present((start, end), " - ")
