from .database import db
from utils.helpers import utcnow

GRID_SIZE = 10
TOTAL_SQUARES = GRID_SIZE * GRID_SIZE

class Square(db.Model):
    """One cell of a board's 10x10 grid; user_id is null while open."""
    __table_args__ = (
        db.UniqueConstraint('board_id', 'row', 'col', name='uq_square_cell'),
    )

    id = db.Column(db.Integer, primary_key=True)
    board_id = db.Column(db.Integer, db.ForeignKey('board.id', ondelete='CASCADE'), nullable=False, index=True)
    row = db.Column(db.Integer, nullable=False)
    col = db.Column(db.Integer, nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='SET NULL'), index=True)
    created_at = db.Column(db.DateTime, default=utcnow)

    user = db.relationship('User')
