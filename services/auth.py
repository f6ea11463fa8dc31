from functools import wraps
from flask import session, g
from werkzeug.security import generate_password_hash, check_password_hash

from models import db, User
from utils.helpers import normalize_email, is_valid_email
from .errors import InvalidInput, Unauthenticated, Conflict

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128

def get_current_user():
    """Load the signed-in user for this request, or None"""
    user_id = session.get('user_id')
    cached = g.get('user')
    if cached is not None and cached.id == user_id:
        return cached

    user = None
    if user_id is not None:
        user = db.session.get(User, user_id)
        if user is None:
            # Account is gone; drop the stale cookie
            session.pop('user_id', None)
    g.user = user
    return user

def login_required(f):
    """Decorator to require a signed-in user"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if get_current_user() is None:
            raise Unauthenticated()
        return f(*args, **kwargs)
    return decorated_function

def register_user(email, password, first_name=None, last_name=None):
    """Create a user account. Email is normalized before the uniqueness check."""
    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        raise InvalidInput('email_password_required')

    email = normalize_email(email)
    if not is_valid_email(email):
        raise InvalidInput('invalid_email')
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidInput('password_too_short', length=MIN_PASSWORD_LENGTH)
    if len(password) > MAX_PASSWORD_LENGTH:
        raise InvalidInput('password_too_long', length=MAX_PASSWORD_LENGTH)

    if User.query.filter_by(email=email).first():
        raise Conflict('user_exists')

    user = User(
        email=email,
        password_hash=generate_password_hash(password),
        first_name=first_name.strip() if isinstance(first_name, str) and first_name.strip() else None,
        last_name=last_name.strip() if isinstance(last_name, str) and last_name.strip() else None,
    )
    db.session.add(user)
    db.session.commit()
    print(f"[Auth] Registered user {user.id} <{user.email}>")
    return user

def authenticate(email, password):
    """Return the user for valid credentials, else raise Unauthenticated"""
    if not isinstance(email, str) or not isinstance(password, str):
        raise Unauthenticated('invalid_login')

    user = User.query.filter_by(email=normalize_email(email)).first()
    if not user or not check_password_hash(user.password_hash, password):
        raise Unauthenticated('invalid_login')
    return user
