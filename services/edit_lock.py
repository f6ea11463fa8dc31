from utils.helpers import utcnow
from .errors import Conflict


def can_edit_now(is_editable, editable_until, now=None):
    """
    Whether a board accepts mutations right now.

    A disabled board is always locked. Without an expiry it stays open,
    otherwise it is open strictly before editable_until and locked from
    that instant on.
    """
    if not is_editable:
        return False
    if editable_until is None:
        return True
    if now is None:
        now = utcnow()
    return editable_until > now


def board_is_locked(board):
    return not can_edit_now(board.is_editable, board.editable_until)


def require_board_editable(board, user):
    """Raise Conflict when the board is locked. Global admins are never locked out."""
    if user is not None and user.is_admin:
        return
    if board_is_locked(board):
        raise Conflict('board_locked')
