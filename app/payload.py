"""
Wire side of the site-config endpoint: the loader expects
``{"siteConfig": {...}}`` and this module builds exactly that.
"""
from __future__ import annotations
import json
from typing import Any, Dict

from normalizer import build_site_config
from schema_site import SiteConfig


def build_config_payload(data: Any) -> Dict[str, SiteConfig]:
    return {"siteConfig": build_site_config(data)}


def presentable(value: Any) -> Any:
    """Copy with None fields elided at every depth; lists stay, even empty ones."""
    if isinstance(value, dict):
        return {k: presentable(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [presentable(v) for v in value]
    return value


def dumps_config(config: SiteConfig) -> str:
    return json.dumps(presentable(config), ensure_ascii=False, indent=2)


def dumps_payload(data: Any) -> str:
    """Raw profile data ➜ JSON body for the site-config endpoint."""
    return json.dumps(presentable(build_config_payload(data)), ensure_ascii=False, indent=2)
