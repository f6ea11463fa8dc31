from .errors import BoardError, InvalidInput, Unauthenticated, NotAMember, Forbidden, NotFound, Conflict
from .auth import login_required, get_current_user, register_user, authenticate
from .access import BoardAccess, resolve_role, require_board_member, require_board_admin, require_board_owner
from .edit_lock import can_edit_now, require_board_editable
from .grid import ensure_grid
from .boards import (get_board_or_404, create_board, update_board, delete_board, list_user_boards,
                     list_members, remove_member)
from .invites import create_invite, find_valid_invite, accept_invite, revoke_invite, list_pending_invites
from .squares import list_squares, claim_square, release_square, reset_board, winning_square
from .props import create_prop, update_prop, delete_prop, set_pick, clear_pick, list_props

__all__ = [
    'BoardError', 'InvalidInput', 'Unauthenticated', 'NotAMember', 'Forbidden', 'NotFound', 'Conflict',
    'login_required', 'get_current_user', 'register_user', 'authenticate',
    'BoardAccess', 'resolve_role', 'require_board_member', 'require_board_admin', 'require_board_owner',
    'can_edit_now', 'require_board_editable', 'ensure_grid',
    'get_board_or_404', 'create_board', 'update_board', 'delete_board', 'list_user_boards',
    'list_members', 'remove_member',
    'create_invite', 'find_valid_invite', 'accept_invite', 'revoke_invite', 'list_pending_invites',
    'list_squares', 'claim_square', 'release_square', 'reset_board', 'winning_square',
    'create_prop', 'update_prop', 'delete_prop', 'set_pick', 'clear_pick', 'list_props',
]
