from sqlalchemy import update

from models import db, Board, BoardMember, Square, BOARD_TYPES, ROLE_RANK
from utils.helpers import parse_datetime, parse_int_param
from .access import require_board_admin, require_board_owner
from .edit_lock import can_edit_now
from .errors import InvalidInput, NotFound, Conflict

MAX_SQUARES_LIMIT = 100


def get_board_or_404(board_id):
    board = db.session.get(Board, board_id)
    if board is None:
        raise NotFound('board_not_found')
    return board


def create_board(name, user, board_type='SQUARES'):
    """Create a board; the creator becomes its OWNER in the same transaction."""
    name = name.strip() if isinstance(name, str) else ''
    if not name:
        raise InvalidInput('name_required')
    if board_type not in BOARD_TYPES:
        raise InvalidInput('invalid_board_type')

    board = Board(name=name, board_type=board_type, created_by_id=user.id)
    board.members.append(BoardMember(user_id=user.id, role='OWNER'))
    db.session.add(board)
    db.session.commit()

    print(f"[Boards] User {user.id} created {board_type} board {board.id} '{board.name}'")
    return board


def update_board(board_id, user, changes):
    """
    Apply settings changes to a board.

    Recognized keys: name, is_editable, editable_until (ISO-8601 or None)
    and max_squares_per_email (1-100 or None). Unknown keys are ignored.
    """
    board = get_board_or_404(board_id)
    require_board_admin(user, board)

    if 'name' in changes:
        name = changes['name'].strip() if isinstance(changes['name'], str) else ''
        if not name:
            raise InvalidInput('name_required')
        board.name = name

    if 'is_editable' in changes:
        if not isinstance(changes['is_editable'], bool):
            raise InvalidInput('invalid_is_editable')
        board.is_editable = changes['is_editable']

    if 'editable_until' in changes:
        try:
            board.editable_until = parse_datetime(changes['editable_until'])
        except (TypeError, ValueError):
            raise InvalidInput('invalid_editable_until')

    if 'max_squares_per_email' in changes:
        raw = changes['max_squares_per_email']
        if raw is None:
            board.max_squares_per_email = None
        else:
            limit = parse_int_param(raw)
            if limit is None or not 1 <= limit <= MAX_SQUARES_LIMIT:
                raise InvalidInput('invalid_square_limit', max=MAX_SQUARES_LIMIT)
            board.max_squares_per_email = limit

    db.session.commit()
    print(f"[Boards] Board {board.id} updated by user {user.id}: {sorted(changes)}")
    return board


def delete_board(board_id, user):
    board = get_board_or_404(board_id)
    require_board_owner(user, board)

    db.session.delete(board)
    db.session.commit()
    print(f"[Boards] Board {board_id} deleted by user {user.id}")


def list_user_boards(user):
    """Memberships of the user with the lock state evaluated now"""
    memberships = (
        BoardMember.query.filter_by(user_id=user.id)
        .join(Board)
        .order_by(Board.created_at.desc())
        .all()
    )
    return [
        {
            'board': m.board,
            'role': m.role,
            'can_edit': can_edit_now(m.board.is_editable, m.board.editable_until),
        }
        for m in memberships
    ]


def list_members(board_id, user):
    board = get_board_or_404(board_id)
    require_board_admin(user, board)
    return (
        BoardMember.query.filter_by(board_id=board.id)
        .order_by(ROLE_RANK, BoardMember.created_at.asc())
        .all()
    )


def remove_member(board_id, member_user_id, user):
    """
    Remove a member, releasing their squares.

    The last OWNER cannot be removed, and nobody can remove themselves
    here. The membership is deleted first and the remaining OWNERs are
    counted afterwards in the same transaction, so two owners removing
    each other cannot both succeed.
    """
    board = get_board_or_404(board_id)
    require_board_admin(user, board)

    if member_user_id == user.id:
        raise Conflict('cannot_remove_self')

    if not BoardMember.query.filter_by(board_id=board.id, user_id=member_user_id).first():
        raise NotFound('member_not_found')

    try:
        # Row lock on PostgreSQL; SQLite serializes on the DELETE below
        db.session.query(Board).filter_by(id=board.id).with_for_update().one()

        deleted = BoardMember.query.filter_by(
            board_id=board.id, user_id=member_user_id
        ).delete(synchronize_session=False)
        if not deleted:
            raise NotFound('member_not_found')

        if BoardMember.query.filter_by(board_id=board.id, role='OWNER').count() == 0:
            raise Conflict('last_owner')

        released = db.session.execute(
            update(Square)
            .where(Square.board_id == board.id, Square.user_id == member_user_id)
            .values(user_id=None)
            .execution_options(synchronize_session=False)
        ).rowcount
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    print(f"[Boards] User {member_user_id} removed from board {board.id}, {released} squares released")
    return released
