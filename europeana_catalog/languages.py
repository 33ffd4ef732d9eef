"""
Реєстр мовних кодів (ISO 639).
Перевіряє, чи є ключ відомим мовним тегом, і повертає канонічні форми коду.
Таблиця мов береться з pycountry.
"""
from functools import lru_cache
from typing import NamedTuple, Optional

import pycountry

# Застарілі коди, які API досі повертає
# https://www.loc.gov/standards/iso639-2/php/code_changes.php
DEPRECATED_ISO_LANG_CODES = frozenset(["in", "iw", "jaw", "ji", "jw", "mo", "mol", "scc", "scr", "sh"])

# Спеціальні ключі мовних карт, які не є кодами ISO.
# Порожній ключ: обхід для некоректних даних з API
NON_ISO_LANG_CODES = frozenset(["def", ""])


class LanguageCodes(NamedTuple):
    alpha2: Optional[str]
    alpha3: str
    bibliographic: Optional[str]

    @property
    def codes(self):
        """Коди у порядку пріоритету, без порожніх і без повторів."""
        result = []
        for code in (self.alpha2, self.alpha3, self.bibliographic):
            if code and code not in result:
                result.append(code)
        return result


# Спеціальні коди ISO 639-2 без двобуквеного відповідника
ISO_639_2_SPECIAL_CODES = frozenset(["mis", "mul", "und", "zxx"])


@lru_cache(maxsize=None)
def _bibliographic_index():
    return {
        lang.bibliographic: lang
        for lang in pycountry.languages
        if getattr(lang, "bibliographic", None)
    }


def _in_iso_639_2(language) -> bool:
    # pycountry містить увесь ISO 639-3 (~7900 кодів: "url", "key", "end"...),
    # тому приймаємо лише мови з кодом ISO 639-1 або бібліографічним кодом 639-2
    return (
        getattr(language, "alpha_2", None) is not None
        or getattr(language, "bibliographic", None) is not None
        or language.alpha_3 in ISO_639_2_SPECIAL_CODES
    )


def find_language(code: str) -> Optional[LanguageCodes]:
    if not isinstance(code, str) or not code:
        return None
    code = code.lower()

    language = None
    if len(code) == 2:
        language = pycountry.languages.get(alpha_2=code)
    elif len(code) == 3:
        language = pycountry.languages.get(alpha_3=code) or _bibliographic_index().get(code)

    if language is None or not _in_iso_639_2(language):
        return None
    return LanguageCodes(
        alpha2=getattr(language, "alpha_2", None),
        alpha3=language.alpha_3,
        bibliographic=getattr(language, "bibliographic", None),
    )


def primary_subtag(tag: str) -> str:
    return tag.split('-')[0]


def is_known_tag(tag) -> bool:
    key = str(tag).lower()
    if key in NON_ISO_LANG_CODES:
        return True
    primary = primary_subtag(key)
    return primary in DEPRECATED_ISO_LANG_CODES or find_language(primary) is not None


def canonical_forms(primary: str) -> Optional[LanguageCodes]:
    return find_language(primary)
