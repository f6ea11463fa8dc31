from .helpers import utcnow, normalize_email, is_valid_email, parse_datetime, parse_int_param
from .i18n import get_language, t

__all__ = ['utcnow', 'normalize_email', 'is_valid_email', 'parse_datetime', 'parse_int_param',
           'get_language', 't']
