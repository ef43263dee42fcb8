import os
from pathlib import Path

# Paths
BASE_DIR = Path(__file__).parent
DATA_PATH = Path(os.getenv("DATA_PATH", BASE_DIR / "data" / "articles.json"))

# Site metadata
SITE_TITLE = os.getenv("SITE_TITLE", "latte notes")
SITE_DESCRIPTION = os.getenv("SITE_DESCRIPTION", "Notes, articles and experiments")
SITE_URL = os.getenv("SITE_URL", "http://localhost:5000").rstrip("/")


def _int_env(name: str, default: int) -> int:
    try:
        value = int(os.getenv(name, default))
    except ValueError:
        return default
    return value if value >= 1 else default


# Articles list
ARTICLES_PAGE_SIZE = _int_env("ARTICLES_PAGE_SIZE", 1)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
