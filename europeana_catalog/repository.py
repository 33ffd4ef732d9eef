import logging

from .cache import build_store
from .config import EUROPEANA_API_KEY, EUROPEANA_API_CACHE, EUROPEANA_API_CACHE_EXPIRES_IN
from .document import Document
from .europeana import EuropeanaClient
from .response import Response

logger = logging.getLogger("Europeana-Repository")


class Repository:
    """
    Репозиторій, підключений до Europeana REST API.
    Перетворює find/search/more_like_this на HTTP-запити через EuropeanaClient.
    """

    MORE_LIKE_THIS_ROWS = 4

    def __init__(self, client=None, document_model=Document, response_model=Response,
                 cache_store=None, cache_expires_in=None):
        self.document_model = document_model
        self.response_model = response_model
        self._cache_store = cache_store
        self._cache_expires_in = cache_expires_in
        self._connection = client

    @property
    def connection(self):
        if self._connection is None:
            self._connection = self.build_connection()
        return self._connection

    def find(self, record_id, params=None, locale=None):
        """
        Знаходить один запис через API.
        :param record_id: ID запису ("provider/record" або "/provider/record")
        """
        if not record_id.startswith('/'):
            record_id = f"/{record_id}"
        params = params or {}
        res = self.connection.record(record_id, params)
        return self.response_model(res, params, document_model=self.document_model, locale=locale)

    def search(self, params=None, locale=None):
        params = params or {}
        res = self.connection.search(params)
        return self.response_model(res, params, document_model=self.document_model, locale=locale)

    def more_like_this(self, doc, field=None, params=None, locale=None):
        """Шукає записи, схожі на документ. Повертає (response, documents)."""
        query = doc.more_like_this_query(field)
        if query is None:
            logger.info(f"No more-like-this terms for {doc.id}")
            return None, []

        mlt_params = {"query": query, "rows": self.MORE_LIKE_THIS_ROWS, "profile": "rich"}
        mlt_params.update(params or {})
        mlt_response = self.search(mlt_params, locale=locale)
        return mlt_response, mlt_response.documents

    def build_connection(self):
        return EuropeanaClient(
            api_key=EUROPEANA_API_KEY,
            cache_store=self.cache_store,
            cache_expires_in=self.cache_expires_in
        )

    @property
    def cache_store(self):
        if self._cache_store is None:
            self._cache_store = build_store(EUROPEANA_API_CACHE, self.cache_expires_in)
        return self._cache_store

    @property
    def cache_expires_in(self):
        if self._cache_expires_in is None:
            self._cache_expires_in = EUROPEANA_API_CACHE_EXPIRES_IN
        return self._cache_expires_in
