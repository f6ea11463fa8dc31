from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.dialects import postgresql, sqlite

db = SQLAlchemy()


def dialect_insert(model):
    """Build an INSERT for the bound dialect so ON CONFLICT clauses are available."""
    if db.session.get_bind().dialect.name == 'postgresql':
        return postgresql.insert(model.__table__)
    return sqlite.insert(model.__table__)
