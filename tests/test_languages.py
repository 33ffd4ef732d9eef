import pytest

from europeana_catalog import languages


@pytest.mark.parametrize("tag", ["en", "EN", "en-GB", "fr", "fre", "fra", "eng", "und"])
def test_is_known_tag_with_iso_codes(tag):
    assert languages.is_known_tag(tag) is True


@pytest.mark.parametrize("tag", ["in", "iw", "jaw", "ji", "jw", "mo", "mol", "scc", "scr", "sh", "iw-IL"])
def test_is_known_tag_with_deprecated_codes(tag):
    assert languages.is_known_tag(tag) is True


@pytest.mark.parametrize("tag", ["def", "DEF", ""])
def test_is_known_tag_with_special_markers(tag):
    assert languages.is_known_tag(tag) is True


@pytest.mark.parametrize("tag", ["about", "dcType", "webResources", "xx", "xx-GB", "europeanaCompleteness"])
def test_is_known_tag_with_unknown_keys(tag):
    assert languages.is_known_tag(tag) is False


@pytest.mark.parametrize("tag", ["end", "top", "url", "key", "set", "bar", "age", "big"])
def test_is_known_tag_ignores_iso_639_3_only_codes(tag):
    assert languages.is_known_tag(tag) is False


@pytest.mark.parametrize("tag", ["mul", "zxx", "mis"])
def test_is_known_tag_with_iso_639_2_special_codes(tag):
    assert languages.is_known_tag(tag) is True


def test_find_language_without_caching_layer():
    assert not hasattr(languages.find_language, "cache_info")
    assert languages.find_language("de").alpha3 == "deu"


def test_canonical_forms_for_alpha2_code():
    codes = languages.canonical_forms("fr")
    assert codes.alpha2 == "fr"
    assert codes.alpha3 == "fra"
    assert codes.bibliographic == "fre"
    assert codes.codes == ["fr", "fra", "fre"]


def test_canonical_forms_for_bibliographic_code():
    assert languages.canonical_forms("ger") == languages.canonical_forms("de")


def test_canonical_forms_without_bibliographic_code():
    codes = languages.canonical_forms("en")
    assert codes.codes == ["en", "eng"]


def test_canonical_forms_is_case_insensitive():
    assert languages.canonical_forms("EN") == languages.canonical_forms("en")


@pytest.mark.parametrize("code", ["", "xx", "e", "engl", "zz_ZZ"])
def test_canonical_forms_for_unknown_code(code):
    assert languages.canonical_forms(code) is None


def test_primary_subtag():
    assert languages.primary_subtag("en-GB") == "en"
    assert languages.primary_subtag("en") == "en"
    assert languages.primary_subtag("zh-Hant-TW") == "zh"
