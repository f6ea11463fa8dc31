import re
from datetime import datetime, timezone

# Same shape check the signup form uses; RFC 5321 caps addresses at 254 chars
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
MAX_EMAIL_LENGTH = 254

def utcnow():
    """Current server time as a naive UTC datetime (the format stored in the database)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)

def normalize_email(email):
    """Lowercase and trim an email address"""
    return email.strip().lower()

def is_valid_email(email):
    if not isinstance(email, str):
        return False
    return bool(EMAIL_PATTERN.match(email)) and len(email) <= MAX_EMAIL_LENGTH

def parse_datetime(value):
    """Parse an ISO-8601 timestamp into naive UTC. Returns None for empty values.

    Raises ValueError for anything that is not a valid timestamp.
    """
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        raw = str(value).strip()
        # fromisoformat only understands the trailing Z from Python 3.11 on
        if raw.endswith('Z'):
            raw = raw[:-1] + '+00:00'
        parsed = datetime.fromisoformat(raw)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed

def parse_int_param(value):
    """Return value if it is a real integer (not a bool or float), else None"""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value
