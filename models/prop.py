from .database import db
from utils.helpers import utcnow

MAX_PROP_OPTIONS = 50

class Prop(db.Model):
    """A multiple-choice question on a props board."""
    id = db.Column(db.Integer, primary_key=True)
    board_id = db.Column(db.Integer, db.ForeignKey('board.id', ondelete='CASCADE'), nullable=False, index=True)
    question = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    options = db.relationship('PropOption', backref='prop', lazy=True,
                              order_by='PropOption.id', cascade='all, delete-orphan')
    picks = db.relationship('PropPick', backref='prop', lazy=True,
                            cascade='all, delete-orphan')


class PropOption(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    prop_id = db.Column(db.Integer, db.ForeignKey('prop.id', ondelete='CASCADE'), nullable=False, index=True)
    label = db.Column(db.String(200), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    picks = db.relationship('PropPick', backref='option', lazy=True,
                            cascade='all')


class PropPick(db.Model):
    """A user's single selection for a prop; (prop_id, user_id) is unique."""
    __table_args__ = (
        db.UniqueConstraint('prop_id', 'user_id', name='uq_prop_pick'),
    )

    id = db.Column(db.Integer, primary_key=True)
    board_id = db.Column(db.Integer, db.ForeignKey('board.id', ondelete='CASCADE'), nullable=False, index=True)
    prop_id = db.Column(db.Integer, db.ForeignKey('prop.id', ondelete='CASCADE'), nullable=False)
    option_id = db.Column(db.Integer, db.ForeignKey('prop_option.id', ondelete='CASCADE'), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    user = db.relationship('User')
