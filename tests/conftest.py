import pytest

from europeana_catalog.lang_maps import LocalePreference


@pytest.fixture
def edm():
    return {
        "id": "/abc/123",
        "type": "IMAGE",
        "title": ["title1", "title2"],
        "proxies": [
            {
                "about": "/proxy/provider/abc/123",
                "dcType": {"def": ["Image"], "en": ["Picture"]},
                "dcSubject": {"def": ["music", "art"]},
                "dcDescription": {"en": ["object desc"]},
            }
        ],
        "aggregations": [
            {
                "webResources": [
                    {"dctermsCreated": 1900},
                    {"dctermsCreated": 1950},
                ]
            }
        ],
        "europeanaAggregation": {"edmPreview": "http://www.example.com/abc/123.jpg"},
        "europeanaCompleteness": 5,
    }


@pytest.fixture
def edm_with_concepts(edm):
    edm["proxies"][0]["dcSubject"] = {"def": ["http://data.europeana.eu/concept/base/48", "painting"]}
    edm["concepts"] = [
        {
            "about": "http://data.europeana.eu/concept/base/48",
            "prefLabel": {"en": ["Photography"], "fr": ["Photographie"]},
        },
        {"about": "http://data.europeana.eu/concept/base/49"},
    ]
    return edm


@pytest.fixture
def english():
    return LocalePreference("en", "en")
