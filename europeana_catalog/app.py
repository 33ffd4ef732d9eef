import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import setup_logging, DEFAULT_LOCALE, AVAILABLE_LOCALES
from .document import Document
from .europeana import EuropeanaAPIError, MissingAPIKeyError, RecordNotFound
from .lang_maps import LocalePreference
from .repository import Repository

setup_logging()
logger = logging.getLogger("Europeana-Catalog")

app = Flask(__name__)
CORS(app)

repository = Repository()

SEARCH_ROWS = 12

def locale_preference():
    """Мова запиту: ?locale=, потім Accept-Language, потім DEFAULT_LOCALE."""
    current = (
        request.args.get('locale')
        or request.accept_languages.best_match(AVAILABLE_LOCALES)
        or DEFAULT_LOCALE
    )
    return LocalePreference.build(current, DEFAULT_LOCALE)

def to_json(value):
    if isinstance(value, Document):
        return value.as_json()
    if isinstance(value, list):
        return [to_json(v) for v in value]
    return value

def find_document(provider_id, record_id, locale):
    response = repository.find(f"{provider_id}/{record_id}", locale=locale)
    if not response.documents:
        raise RecordNotFound(f"{provider_id}/{record_id}")
    return response.documents[0]

@app.errorhandler(RecordNotFound)
def handle_not_found(e):
    return jsonify({"status": "not_found", "message": str(e)}), 404

@app.errorhandler(MissingAPIKeyError)
def handle_missing_key(e):
    return jsonify({"status": "error", "message": str(e)}), 500

@app.errorhandler(EuropeanaAPIError)
def handle_api_error(e):
    return jsonify({"status": "error", "message": str(e)}), 502

@app.errorhandler(Exception)
def handle_unexpected(e):
    if isinstance(e, HTTPException):
        return e
    logger.error(f"❌ Unexpected error [{request.method} {request.path}]: {e}")
    return jsonify({"status": "error", "message": str(e)}), 500

@app.route('/catalog/api/health', methods=['GET'])
def healthcheck(): return jsonify({"status": "ok"})

@app.route('/catalog/api/record/<provider_id>/<record_id>', methods=['GET'])
def show_record(provider_id, record_id):
    locale = locale_preference()
    doc = find_document(provider_id, record_id, locale)

    fields = [f.strip() for f in request.args.get('fields', '').split(',') if f.strip()]
    return jsonify({
        "id": doc.to_param(),
        "locale": locale.current,
        "document": doc.as_json(),
        "fields": {f: to_json(doc.get(f)) for f in fields}
    })

@app.route('/catalog/api/record/<provider_id>/<record_id>/similar', methods=['GET'])
def similar_records(provider_id, record_id):
    locale = locale_preference()
    doc = find_document(provider_id, record_id, locale)

    _, documents = repository.more_like_this(doc, field=request.args.get('field'), locale=locale)
    return jsonify({
        "id": doc.to_param(),
        "documents": [d.as_json() for d in documents]
    })

@app.route('/catalog/api/search', methods=['GET'])
def search_records():
    locale = locale_preference()
    params = {
        "query": request.args.get('query', '*'),
        "rows": request.args.get('rows', SEARCH_ROWS, type=int),
        "start": request.args.get('start', 1, type=int)
    }
    profile = request.args.get('profile')
    if profile:
        params["profile"] = profile

    logger.info(f"🔎 Search: {params['query']} (locale {locale.current})")
    response = repository.search(params, locale=locale)
    return jsonify(response.as_json())
