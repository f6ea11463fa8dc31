from .database import db
from utils.helpers import utcnow

BOARD_TYPES = ('SQUARES', 'PROPS')

class Board(db.Model):
    """Database model for a pool game instance (squares grid or props poll)."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    board_type = db.Column(db.String(10), nullable=False, default='SQUARES')  # SQUARES, PROPS
    created_by_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='SET NULL'))

    # Edit lock
    is_editable = db.Column(db.Boolean, nullable=False, default=True)
    editable_until = db.Column(db.DateTime)
    max_squares_per_email = db.Column(db.Integer)

    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    created_by = db.relationship('User', foreign_keys=[created_by_id])
    members = db.relationship('BoardMember', backref='board', lazy=True,
                              cascade='all, delete-orphan')
    invites = db.relationship('BoardInvite', backref='board', lazy=True,
                              cascade='all, delete-orphan')
    squares = db.relationship('Square', backref='board', lazy=True,
                              cascade='all, delete-orphan')
    props = db.relationship('Prop', backref='board', lazy=True,
                            cascade='all, delete-orphan')
