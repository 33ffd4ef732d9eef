"""
Модуль конфігурації мапування полів для запитів "схожі записи" (More Like This).
Тут визначаються правила, за якими поля документа Europeana потрапляють у пошуковий запит.
"""

# 1. СЛОВНИК МАПУВАННЯ ПОЛІВ (Field Mapping)
# Ключ: поле пошукового запиту API; "fields": шляхи в документі; "boost": вага
MORE_LIKE_THIS_RULES = {
    # --- НАЗВА ---
    "title": {
        "fields": ["proxies.dcTitle"],
        "boost": 0.3
    },

    # --- АВТОРИ ---
    "who": {
        "fields": ["proxies.dcCreator"],
        "boost": 0.5
    },

    # --- ПОСТАЧАЛЬНИК ДАНИХ ---
    "DATA_PROVIDER": {
        "fields": ["aggregations.edmDataProvider"],
        "boost": 0.2
    },

    # --- ТИП ТА ТЕМАТИКА ---
    # Значення часто є URI концептів, тому їх розіменовуємо через prefLabel
    "what": {
        "fields": ["proxies.dcType", "proxies.dcSubject"],
        "boost": 0.8,
        "dereference": True
    }
}

# 2. ПОЛЕ ІДЕНТИФІКАТОРА (щоб виключити сам запис з результатів)
RECORD_ID_FIELD = "europeana_id"
