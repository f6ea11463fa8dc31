from sqlalchemy import case
from .database import db
from utils.helpers import utcnow

ROLES = ('OWNER', 'ADMIN', 'MEMBER')
ADMIN_ROLES = ('OWNER', 'ADMIN')

class BoardMember(db.Model):
    """Membership of a user on a board."""
    __table_args__ = (
        db.UniqueConstraint('board_id', 'user_id', name='uq_board_member'),
    )

    id = db.Column(db.Integer, primary_key=True)
    board_id = db.Column(db.Integer, db.ForeignKey('board.id', ondelete='CASCADE'), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    role = db.Column(db.String(10), nullable=False, default='MEMBER')  # OWNER, ADMIN, MEMBER
    created_at = db.Column(db.DateTime, default=utcnow)


# OWNER first, then ADMIN, then MEMBER
ROLE_RANK = case({'OWNER': 0, 'ADMIN': 1}, value=BoardMember.role, else_=2)
