from .database import db
from utils.helpers import utcnow

class User(db.Model):
    """Database model for player accounts."""
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(254), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    is_admin = db.Column(db.Boolean, default=False, nullable=False)  # global commissioner
    created_at = db.Column(db.DateTime, default=utcnow)

    memberships = db.relationship('BoardMember', backref='user', lazy=True,
                                  cascade='all, delete-orphan')
