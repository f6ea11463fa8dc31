from .database import db, dialect_insert
from .user import User
from .board import Board, BOARD_TYPES
from .board_member import BoardMember, ROLES, ADMIN_ROLES, ROLE_RANK
from .board_invite import BoardInvite
from .square import Square, GRID_SIZE, TOTAL_SQUARES
from .prop import Prop, PropOption, PropPick, MAX_PROP_OPTIONS

__all__ = ['db', 'dialect_insert', 'User', 'Board', 'BOARD_TYPES', 'BoardMember', 'ROLES',
           'ADMIN_ROLES', 'ROLE_RANK', 'BoardInvite', 'Square', 'GRID_SIZE', 'TOTAL_SQUARES', 'Prop',
           'PropOption', 'PropPick', 'MAX_PROP_OPTIONS']
