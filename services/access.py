from collections import namedtuple

from models import BoardMember, ADMIN_ROLES
from .errors import NotAMember, Forbidden

BoardAccess = namedtuple('BoardAccess', ['board_id', 'role'])


def resolve_role(user_id, board_id):
    """Return the user's BoardAccess on a board, or None without a membership row."""
    membership = BoardMember.query.filter_by(board_id=board_id, user_id=user_id).first()
    if not membership:
        return None
    return BoardAccess(membership.board_id, membership.role)


def require_board_member(user, board):
    """Any role will do. Global admins pass without a membership."""
    access = resolve_role(user.id, board.id)
    if access:
        return access
    if user.is_admin:
        return BoardAccess(board.id, None)
    raise NotAMember()


def require_board_admin(user, board):
    """Require OWNER/ADMIN on the board; the creator and global admins are always let through."""
    access = resolve_role(user.id, board.id)
    if user.is_admin or board.created_by_id == user.id:
        return access or BoardAccess(board.id, None)
    if not access:
        raise NotAMember()
    if access.role not in ADMIN_ROLES:
        raise Forbidden('not_authorized')
    return access


def require_board_owner(user, board):
    access = resolve_role(user.id, board.id)
    if user.is_admin or board.created_by_id == user.id:
        return access or BoardAccess(board.id, None)
    if not access:
        raise NotAMember()
    if access.role != 'OWNER':
        raise Forbidden('not_authorized')
    return access


def is_board_admin(user, board):
    """Non-raising variant used to decide what a viewer gets to see."""
    if user is None:
        return False
    if user.is_admin or board.created_by_id == user.id:
        return True
    access = resolve_role(user.id, board.id)
    return bool(access and access.role in ADMIN_ROLES)
