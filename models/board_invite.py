from .database import db
from utils.helpers import utcnow

class BoardInvite(db.Model):
    """Database model for single-use, email-bound board invitations."""
    id = db.Column(db.Integer, primary_key=True)
    board_id = db.Column(db.Integer, db.ForeignKey('board.id', ondelete='CASCADE'), nullable=False, index=True)
    email = db.Column(db.String(254), nullable=False)
    token = db.Column(db.String(100), nullable=False, unique=True)
    used_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=utcnow)
    expires_at = db.Column(db.DateTime, nullable=False)
