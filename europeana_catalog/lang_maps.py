"""
Робота з типом даних "LangMap" у JSON-відповідях Europeana API.
Мовна карта: словник, де кожен ключ є мовним тегом, а значення є списком рядків.
https://pro.europeana.eu/page/intro#datatypes
"""
from collections.abc import Mapping
from typing import NamedTuple

from .languages import canonical_forms, is_known_tag, primary_subtag


class LocalePreference(NamedTuple):
    current: str
    default: str

    @classmethod
    def build(cls, current=None, default="en"):
        return cls(str(current or default), str(default))


def is_lang_map(obj) -> bool:
    # Порожній словник теж вважається мовною картою
    if not isinstance(obj, Mapping):
        return False
    return all(is_known_tag(str(key)) for key in obj.keys())


def flatten(values):
    result = []
    for value in values:
        if isinstance(value, (list, tuple)):
            result.extend(flatten(value))
        else:
            result.append(value)
    return result


def uniq(values):
    result = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


def salient_lang_map_keys(lang_map, locale: str):
    iso_code = primary_subtag(locale)
    iso_locale = canonical_forms(iso_code)

    # Спочатку точні збіги, у фіксованому порядку
    candidates = [locale] + (iso_locale.codes if iso_locale else [])
    keys = []
    for candidate in candidates:
        if candidate in lang_map and candidate not in keys:
            keys.append(candidate)
    if keys:
        return keys

    # Підійде будь-який підкод (en -> en-GB)
    prefix = f"{iso_code}-"
    return [k for k in lang_map.keys() if str(k).startswith(prefix)]


def lang_map_value(lang_map, locale: str):
    keys = salient_lang_map_keys(lang_map, locale)
    if not keys:
        return None
    return uniq(flatten(lang_map[k] for k in keys))


def localize_lang_map(lang_map, locale: LocalePreference):
    if isinstance(lang_map, list):
        return [localize_lang_map(l, locale) for l in lang_map]

    if not is_lang_map(lang_map):
        return lang_map

    for tag in (locale.current, locale.default):
        value = lang_map_value(lang_map, tag)
        if value is not None:
            return value

    return flatten(lang_map.values())
