from collections.abc import Mapping

from .config import DEFAULT_LOCALE
from .lang_maps import LocalePreference, flatten, is_lang_map, localize_lang_map, uniq
from .mapping import MORE_LIKE_THIS_RULES, RECORD_ID_FIELD

_MISSING = object()


class Document:
    """
    Обгортка над записом Europeana API (EDM JSON).

    Дає доступ до полів за шляхом з крапками ("proxies.dcType"), проходячи
    через вкладені зв'язки (proxies, aggregations, ...), та локалізує
    мовні карти згідно з LocalePreference.
    """

    model_name = "Document"

    def __init__(self, source=None, root=None, locale: LocalePreference = None):
        if isinstance(source, Document):
            source = source._source
        self._source = source if source is not None else {}
        # Кореневий запис: звідси беруться концепти для розіменування
        self.root = root if root is not None else self
        self.locale = locale or LocalePreference.build(DEFAULT_LOCALE, DEFAULT_LOCALE)
        self.hierarchy = None

    def __repr__(self):
        return f"<Document {self.id!r}>"

    # --- ДОСТУП ДО ПОЛІВ ---

    def __getitem__(self, key):
        if key not in self._source:
            return None
        return self._localize(self._source[key], self.locale)

    def __contains__(self, key):
        return key in self._source

    def __iter__(self):
        return iter(self._source)

    def __len__(self):
        return len(self._source)

    def keys(self):
        return self._source.keys()

    def fetch(self, path, default=_MISSING, locale: LocalePreference = None):
        """
        Значення поля за шляхом з крапками.

        Один сегмент: відсутнє поле дає default або KeyError (як у словника).
        Кілька сегментів: ніколи не кидає виняток. Якщо перший сегмент є
        списком зв'язків, завжди повертається список (можливо порожній),
        навіть коли передано default: fetch("proxies.x", "none") == [].
        default повертається лише тоді, коли першого сегмента немає
        або він скалярний.
        """
        locale = locale or self.locale
        key, _, rest = str(path).partition('.')

        if not rest:
            if key not in self._source:
                if default is _MISSING:
                    raise KeyError(path)
                return default
            return self._localize(self._source[key], locale)

        fallback = None if default is _MISSING else default
        if key not in self._source:
            return fallback

        value = self._source[key]
        if isinstance(value, list):
            results = []
            for item in value:
                if not self._is_relation(item):
                    continue
                result = self._relation(item, locale).get(rest, locale=locale)
                if result is None:
                    continue
                if isinstance(result, list):
                    results.extend(flatten(result))
                else:
                    results.append(result)
            return results

        if self._is_relation(value):
            return self._relation(value, locale).fetch(rest, fallback, locale=locale)

        # Скаляр, а шлях ще не закінчився
        return fallback

    def get(self, path, default=None, locale: LocalePreference = None):
        return self.fetch(path, default, locale=locale)

    def has(self, path) -> bool:
        key, _, rest = str(path).partition('.')
        if key not in self._source:
            return False
        if not rest:
            return True

        value = self._source[key]
        if isinstance(value, list):
            return any(self._relation(item).has(rest) for item in value if self._is_relation(item))
        if self._is_relation(value):
            return self._relation(value).has(rest)
        return False

    def dereference(self, value, locale: LocalePreference = None):
        """Замінює URI концепту (concepts[].about) на його локалізований prefLabel."""
        if value is None:
            return None

        if isinstance(value, list):
            return [self.dereference(v, locale) for v in value]

        if not isinstance(value, str):
            return value

        concepts = self.root._source.get('concepts') or []
        concept = next((c for c in concepts if isinstance(c, Mapping) and c.get('about') == value), None)
        if concept is not None and 'prefLabel' in concept:
            return localize_lang_map(concept['prefLabel'], locale or self.locale)
        return value

    def _localize(self, value, locale):
        if isinstance(value, list):
            return [self._localize(v, locale) for v in value]
        if is_lang_map(value):
            return localize_lang_map(value, locale)
        if isinstance(value, Mapping):
            return self._relation(value, locale)
        return value

    def _is_relation(self, value):
        return isinstance(value, Mapping) and not is_lang_map(value)

    def _relation(self, source, locale=None):
        return Document(source, root=self.root, locale=locale or self.locale)

    # --- ІДЕНТИФІКАТОРИ ---

    @property
    def id(self):
        return self._source.get('id')

    def _id_parts(self):
        record_id = str(self.id or '')
        if record_id.startswith('/'):
            record_id = record_id[1:]
        parts = record_id.split('/')
        return parts + [None] * (2 - len(parts))

    @property
    def provider_id(self):
        return self._id_parts()[0]

    @property
    def record_id(self):
        return self._id_parts()[1]

    def to_param(self):
        return f"{self.provider_id}/{self.record_id}"

    def persisted(self):
        return True

    def is_public(self, user=None):
        return True

    def is_private(self, user=None):
        return False

    # --- СЕРІАЛІЗАЦІЯ ---

    def as_json(self):
        data = dict(self._source)
        if self.hierarchy is not None:
            hierarchy = self.hierarchy
            data['hierarchy'] = hierarchy.as_json() if hasattr(hierarchy, 'as_json') else hierarchy
        return data

    # --- СХОЖІ ЗАПИСИ (More Like This) ---

    def more_like_this_query(self, field=None):
        field_queries = self.more_like_this_field_queries(field)
        if not field_queries:
            return None
        return f"({' OR '.join(field_queries)}) NOT {RECORD_ID_FIELD}:\"{self.id}\""

    def more_like_this_field_queries(self, field=None):
        if field is None:
            rules = MORE_LIKE_THIS_RULES.items()
        elif field in MORE_LIKE_THIS_RULES:
            rules = [(field, MORE_LIKE_THIS_RULES[field])]
        else:
            return []

        queries = []
        for param, rule in rules:
            terms = self.more_like_this_field_terms(rule['fields'], rule.get('dereference', False))
            if not terms:
                continue
            quoted = ' OR '.join(f'"{_escape_term(t)}"' for t in terms)
            queries.append(f"{param}:({quoted})^{rule['boost']}")
        return queries

    def more_like_this_field_terms(self, fields, dereference=False):
        terms = []
        for path in fields:
            value = self.get(path)
            if dereference:
                value = self.dereference(value)
            terms.extend(flatten([value]))
        return uniq([t for t in terms if isinstance(t, str) and t.strip()])


def _escape_term(term):
    return term.replace('\\', '\\\\').replace('"', '\\"')
