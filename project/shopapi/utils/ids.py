# shopapi/utils/ids.py

import time
import secrets
import string
from datetime import datetime, timezone

_ALPHABET = string.digits + string.ascii_lowercase


def generate_id() -> str:
    """Идентификатор вида <миллисекунды><9 символов base36>."""
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(9))
    return f"{int(time.time() * 1000)}{suffix}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
