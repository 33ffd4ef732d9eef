import threading
import time
import logging

# Налаштування логера для цього модуля
logger = logging.getLogger("Europeana-Cache")


class MemoryStore:
    """
    Кеш відповідей API у пам'яті процесу (In-Memory).
    Структура: { "cache_key": { "value": ..., "created_at": time, "expires_in": seconds } }
    """

    # Кожні N записів застарілі значення видаляються автоматично
    CLEANUP_INTERVAL = 100

    def __init__(self, expires_in=24 * 60 * 60):
        self.expires_in = expires_in
        self._entries = {}
        self._writes = 0
        self._lock = threading.Lock()

    def _is_expired(self, entry, now):
        expires_in = entry["expires_in"]
        return expires_in is not None and now - entry["created_at"] > expires_in

    def _prune(self, now):
        # Викликається лише під self._lock
        to_delete = [k for k, entry in self._entries.items() if self._is_expired(entry, now)]
        for k in to_delete:
            del self._entries[k]
        return len(to_delete)

    def read(self, key):
        """Повертає значення з кешу або None (якщо немає або застаріло)"""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._is_expired(entry, time.time()):
                del self._entries[key]
                return None
            return entry["value"]

    def write(self, key, value, expires_in=None):
        now = time.time()
        with self._lock:
            self._entries[key] = {
                "value": value,
                "created_at": now,
                "expires_in": expires_in if expires_in is not None else self.expires_in
            }
            self._writes += 1
            if self._writes % self.CLEANUP_INTERVAL == 0:
                removed = self._prune(now)
                if removed:
                    logger.debug(f"Evicted {removed} expired cache entries on write.")

    def fetch(self, key, func, expires_in=None):
        """
        Повертає значення з кешу, а якщо його немає, обчислює через func() і зберігає.
        :param func: Функція без аргументів (наприклад, HTTP-запит до API)
        """
        value = self.read(key)
        if value is not None:
            logger.debug(f"Cache hit: {key}")
            return value

        logger.debug(f"Cache miss: {key}")
        value = func()
        if value is not None:
            self.write(key, value, expires_in)
        return value

    def delete(self, key):
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self):
        with self._lock:
            self._entries.clear()

    def cleanup_expired(self):
        """Очищення пам'яті від застарілих записів (можна викликати періодично)"""
        now = time.time()
        with self._lock:
            removed = self._prune(now)
        if removed:
            logger.info(f"🧹 Cleaned up {removed} expired cache entries.")
        return removed


class NullStore:
    """Кеш, який нічого не зберігає (кешування вимкнене)."""

    def __init__(self, expires_in=None):
        self.expires_in = expires_in

    def read(self, key):
        return None

    def write(self, key, value, expires_in=None):
        pass

    def fetch(self, key, func, expires_in=None):
        return func()

    def delete(self, key):
        return False

    def clear(self):
        pass

    def cleanup_expired(self):
        return 0


STORES = {
    "memory": MemoryStore,
    "null": NullStore,
}


def build_store(name, expires_in=None):
    store_class = STORES.get((name or "null").lower())
    if store_class is None:
        raise ValueError(f"Unknown cache store: '{name}'")
    if expires_in is None:
        return store_class()
    return store_class(expires_in=expires_in)
