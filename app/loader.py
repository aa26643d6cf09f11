"""
Site config loader.

• Reads the portfolio's site config from the public template endpoint.
• One uncached GET, no retry.
• Any failure (network, status, body) falls back to the sample site;
  callers always get a usable config and never see an exception.
"""

from __future__ import annotations
import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from config import REQUEST_TIMEOUT
from sample_site import default_site_config
from schema_site import SiteConfig

logger = logging.getLogger(__name__)

_CONFIG_PATH = "/api/public/templates/devportfolio/config"
_HEADERS = {
    "Accept": "application/json",
    "Cache-Control": "no-store",
}


class SiteConfigUnavailable(Exception):
    """The remote site config could not be retrieved or understood."""


def site_config_url(base_url: str, portfolio_id: str) -> str:
    """Endpoint URL for one portfolio's site config."""
    return f"{base_url.rstrip('/')}{_CONFIG_PATH}?portfolioId={quote(portfolio_id, safe='')}"


def _request_site_config(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> SiteConfig:
    """
    Fetch and unwrap ``{"siteConfig": {...}}``.

    Raises:
        SiteConfigUnavailable: on transport failure, non-2xx status,
            non-JSON body, or a body without a siteConfig object.
    """
    http = session or requests
    try:
        response = http.get(url, headers=_HEADERS, timeout=timeout or REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SiteConfigUnavailable(f"request failed: {e}") from e

    try:
        body: Any = response.json()
    except ValueError as e:
        raise SiteConfigUnavailable(f"response is not JSON: {e}") from e

    site_config = body.get("siteConfig") if isinstance(body, dict) else None
    if not isinstance(site_config, dict):
        raise SiteConfigUnavailable("response has no siteConfig object")
    return site_config


def fetch_site_config(
    base_url: str,
    portfolio_id: Optional[str] = None,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> SiteConfig:
    """
    Site config for ``portfolio_id``, or the sample config.

    Without an id no request is made. The remote config is returned as-is;
    it is already normalised by the server.
    """
    if not portfolio_id:
        logger.debug("No portfolio id, using sample site config")
        return default_site_config()

    url = site_config_url(base_url, portfolio_id)
    logger.debug(f"Requesting site config from {url}")
    try:
        return _request_site_config(url, session=session, timeout=timeout)
    except SiteConfigUnavailable as e:
        logger.warning(f"Site config for portfolio {portfolio_id!r} unavailable ({e}), using sample")
        return default_site_config()


def load_configured_site() -> SiteConfig:
    """Site config for the portfolio named in the environment."""
    from config import PORTFOLIO_API_BASE_URL, PORTFOLIO_ID
    return fetch_site_config(PORTFOLIO_API_BASE_URL, PORTFOLIO_ID)


if __name__ == "__main__":
    # dev preview: print the config the site would render
    from config import LOG_LEVEL
    from payload import dumps_config

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    print(dumps_config(load_configured_site()))
