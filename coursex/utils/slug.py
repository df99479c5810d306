import re
import time
import unicodedata


def slugify(value: str) -> str:
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^\w\s-]", "", value.lower())
    value = re.sub(r"[\s_-]+", "-", value).strip("-")
    return value or "course"


def with_timestamp_suffix(slug: str) -> str:
    """Disambiguate a taken slug with the current unix time in milliseconds."""
    return f"{slug}-{int(time.time() * 1000)}"
