import os
import logging
import sys

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), '../.env'))

def get_env(key: str, required: bool = True, default: str = None) -> str:
    val = os.getenv(key, default)
    if required and not val:
        raise ValueError(f"CRITICAL ERROR: Environment variable '{key}' is missing.")
    return val

def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)

# --- КОНФІГУРАЦІЯ ---

EUROPEANA_API_URL = get_env("EUROPEANA_API_URL", required=False, default="https://api.europeana.eu/record/v2").rstrip('/')
# Ключ перевіряється клієнтом під час запиту, а не при імпорті
EUROPEANA_API_KEY = get_env("EUROPEANA_API_KEY", required=False)

# "memory" або "null" (вимкнений кеш)
EUROPEANA_API_CACHE = get_env("EUROPEANA_API_CACHE", required=False, default="memory")
EUROPEANA_API_CACHE_EXPIRES_IN = int(get_env("EUROPEANA_API_CACHE_EXPIRES_IN", required=False, default=str(24 * 60 * 60)))

DEFAULT_LOCALE = get_env("DEFAULT_LOCALE", required=False, default="en")
AVAILABLE_LOCALES = [l.strip() for l in get_env("AVAILABLE_LOCALES", required=False, default="en,fr,es").split(',') if l.strip()]

TIMEOUT = 30
