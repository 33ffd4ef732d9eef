from .document import Document


class Response:
    """
    Відповідь Europeana API, загорнута в документи.
    Запис: {"object": {...}}; пошук: {"items": [...], "totalResults": N, "facets": [...]}.
    """

    def __init__(self, payload, params=None, document_model=Document, locale=None):
        self.payload = payload or {}
        self.params = dict(params or {})
        self.document_model = document_model
        self.locale = locale
        self.documents = self._build_documents()

    def _build_documents(self):
        if 'object' in self.payload:
            sources = [self.payload['object']]
        else:
            sources = self.payload.get('items') or []
        return [self.document_model(source, locale=self.locale) for source in sources if source]

    @property
    def total(self):
        return self.payload.get('totalResults', len(self.documents))

    @property
    def facets(self):
        return self.payload.get('facets') or []

    def as_json(self):
        return {
            "total": self.total,
            "documents": [doc.as_json() for doc in self.documents],
            "facets": self.facets
        }
