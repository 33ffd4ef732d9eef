import logging
from urllib.parse import urlencode

import requests
from requests.exceptions import RequestException

from .cache import NullStore
from .config import EUROPEANA_API_URL, EUROPEANA_API_KEY, TIMEOUT

logger = logging.getLogger("EuropeanaClient")


class EuropeanaAPIError(Exception):
    pass


class RecordNotFound(EuropeanaAPIError):
    pass


class MissingAPIKeyError(EuropeanaAPIError):
    pass


class EuropeanaClient:
    def __init__(self, api_key=None, base_url=None, cache_store=None, cache_expires_in=None, timeout=TIMEOUT):
        self.api_key = api_key if api_key is not None else EUROPEANA_API_KEY
        self.base_url = (base_url or EUROPEANA_API_URL).rstrip('/')
        self.cache_store = cache_store if cache_store is not None else NullStore()
        self.cache_expires_in = cache_expires_in
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def record(self, record_id, params=None):
        """
        Отримує один запис за його ID ("/provider/record").
        GET {base}/provider/record.json
        """
        if not record_id.startswith('/'):
            record_id = f"/{record_id}"
        return self._get(f"{record_id}.json", params)

    def search(self, params=None):
        """Пошук записів. GET {base}/search.json"""
        return self._get("/search.json", params)

    def _cache_key(self, url, params):
        # wskey не потрапляє в ключ кешу
        query = urlencode(sorted((k, v) for k, v in params.items() if k != 'wskey'), doseq=True)
        return f"europeana:{url}?{query}"

    def _get(self, endpoint, params=None):
        if not self.api_key:
            logger.error("❌ Europeana API key is missing (EUROPEANA_API_KEY)")
            raise MissingAPIKeyError("Europeana API key is missing")

        url = f"{self.base_url}{endpoint}"
        params = dict(params or {})
        key = self._cache_key(url, params)
        return self.cache_store.fetch(key, lambda: self._request(url, params), self.cache_expires_in)

    def _request(self, url, params):
        query = dict(params, wskey=self.api_key)
        logger.info(f"🔎 GET {url}")

        try:
            resp = self.session.get(url, params=query, timeout=self.timeout)
        except RequestException as e:
            logger.error(f"❌ Request Exception [GET {url}]: {e}")
            raise EuropeanaAPIError(f"Europeana API is unreachable: {e}") from e

        if resp.status_code == 404:
            logger.warning(f"⚠️ Not found (404): {url}")
            raise RecordNotFound(f"Not found: {url}")

        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"❌ Failed to parse JSON [Status {resp.status_code}]: {resp.text[:200]}")
            raise EuropeanaAPIError(f"Invalid JSON from Europeana API (HTTP {resp.status_code})") from e

        if not isinstance(data, dict):
            logger.error(f"❌ Unexpected response body: {str(data)[:200]}")
            raise EuropeanaAPIError("Unexpected response body from Europeana API")

        if resp.status_code != 200 or data.get('success') is False:
            error = data.get('error') or f"HTTP {resp.status_code}"
            logger.error(f"❌ Request failed [Status {resp.status_code}]: {error}")
            raise EuropeanaAPIError(error)

        return data
