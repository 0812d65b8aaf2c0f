"""Remote icon data provider and its cached front.

The provider speaks the Iconify HTTP API. ``IconSource`` puts a
``ResourceCache`` in front of it so repeated lookups within the expiry
window never reach the network.
"""

import logging
from typing import Protocol

import requests

from .cache import ResourceCache, icon_key, list_key
from .errors import NetworkFetchError
from .identifiers import normalize_icon_name

log = logging.getLogger(__name__)

ICONIFY_API = "https://api.iconify.design"
DEFAULT_TIMEOUT = 30


class IconProvider(Protocol):
    """Source of icon names and icon markup."""

    def list_icon_names(self, prefix: str) -> list[str]: ...

    def fetch_icon_markup(self, prefix: str, name: str) -> str: ...


class IconifyProvider:
    """Client for the Iconify API.

    Args:
        base_url: API root URL.
        timeout: Request timeout in seconds.
        session: Optional requests session (created when omitted).
    """

    def __init__(
        self,
        base_url: str = ICONIFY_API,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def _get(self, path: str, what: str, **params: str) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params or None, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkFetchError(f"Failed to fetch {what}: {e}") from e
        if not response.ok:
            raise NetworkFetchError(f"Failed to fetch {what}: HTTP {response.status_code} {response.reason}")
        return response

    def list_icon_names(self, prefix: str) -> list[str]:
        """List icon names of a collection.

        Uncategorized names come first, followed by categorized names in
        category order. Duplicates are dropped.

        Raises:
            NetworkFetchError: If the request fails.
        """
        response = self._get("/collection", "icon list", prefix=prefix)
        try:
            data = response.json()
        except ValueError as e:
            raise NetworkFetchError(f"Failed to fetch icon list: invalid JSON ({e})") from e

        if not isinstance(data, dict):
            return []

        names: list[str] = list(data.get("uncategorized") or [])
        for category_names in (data.get("categories") or {}).values():
            names.extend(category_names)
        return list(dict.fromkeys(names))

    def fetch_icon_markup(self, prefix: str, name: str) -> str:
        """Fetch the SVG markup of one icon.

        Raises:
            NetworkFetchError: If the request fails.
        """
        path = f"/{prefix}/{normalize_icon_name(name)}.svg"
        return self._get(path, "icon SVG").text


class IconSource:
    """Cached access to an icon provider."""

    def __init__(self, provider: IconProvider, cache: ResourceCache | None = None):
        self.provider = provider
        self.cache = cache if cache is not None else ResourceCache()

    def list_icon_names(self, prefix: str) -> list[str]:
        key = list_key(prefix)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        try:
            names = self.provider.list_icon_names(prefix)
        except NetworkFetchError:
            log.error("Error fetching icon list for %s", prefix)
            raise
        self.cache.put(key, names)
        return names

    def get_icon_svg(self, prefix: str, name: str) -> str:
        key = icon_key(prefix, name)
        cached = self.cache.get(key)
        if cached:
            return cached

        try:
            svg = self.provider.fetch_icon_markup(prefix, name)
        except NetworkFetchError:
            log.error("Error fetching icon SVG for %s:%s", prefix, name)
            raise
        self.cache.put(key, svg)
        return svg
